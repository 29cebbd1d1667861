"""Main CLI entry point for zbase32codec."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .. import __version__
from ..codec import decode, encode
from ..exceptions import ZBase32Error
from ..formatting import GroupingConfig, group_symbols, normalize_symbols

logger = logging.getLogger(__name__)

MODES = ("encode", "decode", "help")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the zbase32 command."""
    parser = argparse.ArgumentParser(
        prog="zbase32",
        description="zbase32: Z-Base-32 encoder and decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  zbase32 encode foo                     Encode a text operand
  zbase32 decode c3zs6                   Decode a text operand
  zbase32 encode < file                  Encode standard input
  printf '\\x00\\xff' | zbase32 encode     Encode raw bytes from a pipe
  zbase32 encode abcdefghij --group 5    Split output into groups of 5
  zbase32 encode --bits 5 p              Encode only the first 5 bits
  zbase32 help                           Show this message

Example: zbase32 encode foo
Result: c3zs6
        """,
    )

    parser.add_argument(
        "mode",
        type=str.lower,
        choices=MODES,
        help="operation to perform",
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="operand to encode or decode (default: read standard input)",
    )

    parser.add_argument(
        "--bits",
        metavar="N",
        type=int,
        help="encode only the first N bits of the input",
    )

    parser.add_argument(
        "--group",
        metavar="SIZE",
        type=int,
        help="split encoded output into hyphen-separated groups of SIZE symbols",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to standard error",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"zbase32 {__version__}",
    )

    return parser


def run_encode(data: bytes, bits: Optional[int], group: Optional[int]) -> bytes:
    """Encode `data` and apply optional grouping."""
    symbols = encode(data, bits)
    if group is not None:
        return group_symbols(symbols, GroupingConfig(size=group)).encode("ascii")
    return symbols


def run_decode(text: bytes) -> bytes:
    """Normalize hand-entered or piped text and decode it."""
    return decode(normalize_symbols(text))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the zbase32 CLI.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.mode == "help":
        if args.text is not None:
            parser.error("help takes no operand")
        parser.print_help(sys.stdout)
        return 0

    if args.mode == "decode" and (args.bits is not None or args.group is not None):
        parser.error("--bits and --group only apply to encode")

    streaming = args.text is None
    try:
        if streaming:
            logger.debug("reading %s input from standard input", args.mode)
            data = sys.stdin.buffer.read()
        else:
            # Recover the exact argv bytes, including undecodable ones
            data = os.fsencode(args.text)

        if args.mode == "encode":
            result = run_encode(data, args.bits, args.group)
        else:
            result = run_decode(data)

        out = sys.stdout.buffer
        out.write(result if streaming else result + b"\n")
        out.flush()
    except ZBase32Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: I/O failure: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
