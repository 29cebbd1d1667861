#!/usr/bin/env python3
"""Basic usage example for zbase32codec.

This example demonstrates:
1. Encoding whole bytes and a bit-granular value
2. Decoding back to bytes
3. Pre-sizing buffers with the sizing helpers
4. Grouping output for people reading it aloud
5. Carrying binary data in a Pydantic model
"""

from __future__ import annotations

from pydantic import BaseModel

from zbase32codec import (
    InvalidSymbolError,
    ZBase32Bytes,
    decode,
    decoded_byte_count,
    encode,
    encoded_symbol_count,
    group_symbols,
    normalize_symbols,
)


class PairingCode(BaseModel):
    """Pairing code shown on a device label."""

    serial: int
    code: ZBase32Bytes


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("zbase32codec Basic Usage Example")
    print("=" * 60)
    print()

    # Encode whole bytes
    print("1. Encoding bytes...")
    data = b"foo"
    symbols = encode(data)
    print(f"   {data!r} -> {symbols.decode()}")

    # Encode only the significant bits of a small value
    value = 0xB75  # 12 bits, left-aligned in two bytes
    short_symbols = encode((value << 4).to_bytes(2, "big"), 12)
    print(f"   12-bit value {value:#x} -> {short_symbols.decode()} ({len(short_symbols)} symbols)")
    print()

    # Decode
    print("2. Decoding...")
    decoded = decode(symbols)
    print(f"   {symbols.decode()} -> {decoded!r}")
    print(f"   First {len(data)} bytes match: {decoded[: len(data)] == data}")
    print()

    # Sizing
    print("3. Sizing...")
    for length in (1, 3, 5, 16, 32):
        count = encoded_symbol_count(length * 8)
        print(f"   {length:2d} bytes -> {count:2d} symbols -> {decoded_byte_count(count):2d} bytes")
    print()

    # Grouping for transcription
    print("4. Grouping for transcription...")
    code = bytes(range(1, 11))
    grouped = group_symbols(encode(code))
    print(f"   Printed label: {grouped}")
    typed = grouped.upper()
    print(f"   Typed back:    {typed}")
    print(f"   Recovered:     {decode(normalize_symbols(typed))[: len(code)] == code}")

    try:
        decode(normalize_symbols(typed.replace("Y", "0")))
    except InvalidSymbolError as err:
        print(f"   Typo caught:   {err}")
    print()

    # Pydantic
    print("5. Pydantic model...")
    pairing = PairingCode(serial=1001, code=code)
    print(f"   JSON: {pairing.model_dump_json()}")
    restored = PairingCode.model_validate_json(pairing.model_dump_json())
    print(f"   Round trip equal: {restored == pairing}")


if __name__ == "__main__":
    main()
