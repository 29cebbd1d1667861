"""Z-Base-32 encoder.

This module provides the encode() function that converts binary data to
Z-Base-32 symbols by walking the input bit stream 5 bits at a time.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..exceptions import InvalidArgumentError
from ..utils.sizing import MAX_SIGNIFICANT_BITS, encoded_symbol_count
from .alphabet import ALPHABET
from .phases import phase_for

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def encode(data: BytesLike, significant_bits: Optional[int] = None) -> bytes:
    """Encode binary data to Z-Base-32 symbols.

    The first `significant_bits` bits of `data` are encoded, MSB first within
    each byte. The count is rounded up to a multiple of 5 by padding with
    zero bits: buffer bits past `significant_bits` never reach the output.
    Bits past the end of `data` also read as zero, so a short buffer is never
    read out of bounds.

    Args:
        data: Bytes-like input buffer
        significant_bits: Number of leading bits to encode (default: all of data)

    Returns:
        ASCII bytes, one alphabet character per 5 bits

    Raises:
        InvalidArgumentError: If data is not bytes-like or too large, or
            significant_bits is negative, not an int, or too large

    Examples:
        >>> encode(b"foo")
        b'c3zs6'
        >>> encode(b"\\xff", 1)
        b'o'
        >>> encode(b"", 10)
        b'yy'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"data must be bytes-like, got {type(data).__name__}")

    data = bytes(data)
    if significant_bits is None:
        if len(data) > MAX_SIGNIFICANT_BITS // 8:
            raise InvalidArgumentError(
                f"data is too large to encode: {len(data)} bytes "
                f"(at most {MAX_SIGNIFICANT_BITS // 8} bytes)"
            )
        significant_bits = len(data) * 8

    symbol_count = encoded_symbol_count(significant_bits)
    logger.debug(
        "encoding %d bits from %d bytes into %d symbols",
        significant_bits,
        len(data),
        symbol_count,
    )

    # Zero-fill on read for bytes past the end of the buffer
    size = len(data)
    last = symbol_count - 1
    # Clears the rounding bits of the last symbol
    padding_mask = ~((1 << (symbol_count * 5 - significant_bits)) - 1)
    out = bytearray(symbol_count)
    cursor = 0
    for position in range(symbol_count):
        phase = phase_for(position)
        high = data[cursor] if cursor < size else 0
        low = data[cursor + 1] if cursor + 1 < size else 0
        window = (high << 8) | low
        value = (window >> phase.shift) & phase.mask
        if position == last:
            value &= padding_mask
        out[position] = ALPHABET[value]
        cursor += phase.advance

    return bytes(out)
