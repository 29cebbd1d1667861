"""Buffer sizing for encode and decode.

These functions compute output sizes without running the codec, so callers can
pre-size buffers or validate lengths up front.
"""

from __future__ import annotations

from ..exceptions import InvalidArgumentError

# Largest significant bit count accepted by the codec
MAX_SIGNIFICANT_BITS = 2**31 - 1

# Bytes written by a trailing partial group of 0-7 symbols
DECODED_JUMPS: tuple[int, ...] = (0, 1, 2, 2, 3, 4, 4, 5)


def _check_count(name: str, value: object, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")
    if value > maximum:
        raise InvalidArgumentError(f"{name} must be <= {maximum}, got {value}")
    return value


def encoded_symbol_count(bits: int) -> int:
    """Calculate how many symbols encoding `bits` significant bits produces.

    The bit count is rounded up to the next multiple of 5, so every symbol
    carries exactly 5 bits.

    Args:
        bits: Number of significant input bits

    Returns:
        Number of output symbols, ceil(bits / 5)

    Raises:
        InvalidArgumentError: If bits is negative, not an int, or too large

    Example:
        >>> encoded_symbol_count(24)
        5
        >>> encoded_symbol_count(25)
        5
        >>> encoded_symbol_count(26)
        6
    """
    bits = _check_count("bits", bits, MAX_SIGNIFICANT_BITS)
    return (bits + 4) // 5


def encoded_bits(bits: int) -> int:
    """Calculate the encoded size in bits when each symbol takes one ASCII byte.

    Args:
        bits: Number of significant input bits

    Returns:
        encoded_symbol_count(bits) * 8

    Raises:
        InvalidArgumentError: If bits is negative, not an int, or too large
    """
    return encoded_symbol_count(bits) << 3


def decoded_byte_count(symbol_count: int) -> int:
    """Calculate the size of the buffer a decode of `symbol_count` symbols fills.

    Every full group of 8 symbols yields 5 bytes. A trailing partial group
    yields DECODED_JUMPS[symbol_count % 8] bytes, which counts the last,
    partially filled byte as well.

    Args:
        symbol_count: Number of encoded symbols

    Returns:
        Decoded size in bytes

    Raises:
        InvalidArgumentError: If symbol_count is negative, not an int, or too large

    Example:
        >>> decoded_byte_count(8)
        5
        >>> decoded_byte_count(9)
        6
    """
    symbol_count = _check_count(
        "symbol_count", symbol_count, encoded_symbol_count(MAX_SIGNIFICANT_BITS)
    )
    return symbol_count // 8 * 5 + DECODED_JUMPS[symbol_count % 8]
