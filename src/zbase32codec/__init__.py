"""zbase32codec: Z-Base-32 Binary-to-Text Codec

A Python implementation of Z-Base-32, the human-oriented base-32 encoding
described by Zooko O'Whielacronx. Its alphabet avoids visually ambiguous
characters and puts the easiest-to-read characters in the most frequent
positions.

See: https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt

Key Features:
- Bit-granular encoding (encode any number of leading bits)
- Exact buffer sizing helpers for both directions
- Strict decoding that reports invalid symbols
- Grouping helpers for human transcription
- Pydantic field type for Z-Base-32 encoded bytes

Quick Start:
    >>> from zbase32codec import encode, decode
    >>> encode(b"foo")
    b'c3zs6'
    >>> decode(b"c3zs6")[:3]
    b'foo'
    >>> encode(b"\\xf0", 4)
    b'6'
"""

from __future__ import annotations

from .codec import ALPHABET, INVALID_SYMBOL, REVERSE_ALPHABET, decode, encode, is_valid
from .exceptions import InvalidArgumentError, InvalidSymbolError, ZBase32Error
from .formatting import GroupingConfig, group_symbols, normalize_symbols
from .models import ZBase32Bytes
from .utils import (
    DECODED_JUMPS,
    MAX_SIGNIFICANT_BITS,
    decoded_byte_count,
    encoded_bits,
    encoded_symbol_count,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "is_valid",
    # Alphabet
    "ALPHABET",
    "REVERSE_ALPHABET",
    "INVALID_SYMBOL",
    # Exceptions
    "ZBase32Error",
    "InvalidArgumentError",
    "InvalidSymbolError",
    # Sizing
    "encoded_symbol_count",
    "encoded_bits",
    "decoded_byte_count",
    "DECODED_JUMPS",
    "MAX_SIGNIFICANT_BITS",
    # Formatting
    "GroupingConfig",
    "group_symbols",
    "normalize_symbols",
    # Pydantic
    "ZBase32Bytes",
    # Version
    "__version__",
]
