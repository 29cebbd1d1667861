"""Z-Base-32 decoder.

This module provides the decode() function that converts Z-Base-32 symbols
back to binary data, and is_valid() for checking input up front.
"""

from __future__ import annotations

import logging
from typing import Union

from ..exceptions import InvalidArgumentError, InvalidSymbolError
from ..utils.sizing import decoded_byte_count
from .alphabet import INVALID_SYMBOL, REVERSE_ALPHABET
from .phases import phase_for

logger = logging.getLogger(__name__)

SymbolsLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(symbols: SymbolsLike) -> bytes:
    if isinstance(symbols, str):
        try:
            return symbols.encode("ascii")
        except UnicodeEncodeError as err:
            raise InvalidSymbolError(symbols[err.start], err.start) from err
    if isinstance(symbols, (bytes, bytearray, memoryview)):
        return bytes(symbols)
    raise InvalidArgumentError(f"symbols must be str or bytes-like, got {type(symbols).__name__}")


def decode(symbols: SymbolsLike) -> bytes:
    """Decode Z-Base-32 symbols to binary data.

    The output has decoded_byte_count(len(symbols)) bytes. When the symbol
    count is not a multiple of 8 the last byte is only partially filled from
    the input; its remaining low bits are zero.

    Args:
        symbols: Encoded symbols as ASCII bytes or str

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: If any character is not in the alphabet
        InvalidArgumentError: If symbols is neither str nor bytes-like

    Example:
        >>> decode(b"c3zs6")
        b'foo\\x00'
        >>> decode("")
        b''
    """
    encoded = _as_bytes(symbols)
    size = decoded_byte_count(len(encoded))
    logger.debug("decoding %d symbols into %d bytes", len(encoded), size)

    out = bytearray(size)
    cursor = 0
    for position, char in enumerate(encoded):
        value = REVERSE_ALPHABET[char]
        if value == INVALID_SYMBOL:
            raise InvalidSymbolError(chr(char), position)

        phase = phase_for(position)
        window = (value & phase.mask) << phase.shift
        out[cursor] |= window >> 8
        if cursor + 1 < size:
            out[cursor + 1] |= window & 0xFF
        cursor += phase.advance

    return bytes(out)


def is_valid(symbols: SymbolsLike) -> bool:
    """Check whether every character of `symbols` is an alphabet symbol.

    Args:
        symbols: Candidate encoded text, str or bytes-like

    Returns:
        True if decode() would accept the input
    """
    try:
        encoded = _as_bytes(symbols)
    except InvalidSymbolError:
        return False
    return all(REVERSE_ALPHABET[char] != INVALID_SYMBOL for char in encoded)
