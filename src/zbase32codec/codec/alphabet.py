"""Forward and reverse Z-Base-32 alphabet tables.

The ordering of ALPHABET is the wire format: each character's position is the
5-bit value it carries. Both tables are built once at import time and never
mutated, so they can be shared freely between threads.

See: https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt
"""

from __future__ import annotations

ALPHABET = b"ybndrfg8ejkmcpqxot1uwisza345h769"

# Reverse lookup marker for bytes that are not alphabet symbols
INVALID_SYMBOL = 0xFF


def _build_reverse(alphabet: bytes) -> tuple[int, ...]:
    table = [INVALID_SYMBOL] * 256
    for index, char in enumerate(alphabet):
        table[char] = index
    return tuple(table)


REVERSE_ALPHABET: tuple[int, ...] = _build_reverse(ALPHABET)


def symbol_index(char: int) -> int:
    """Return the 5-bit value of an alphabet byte.

    Args:
        char: Byte value (0-255)

    Returns:
        Index 0-31, or INVALID_SYMBOL if the byte is not in the alphabet
    """
    return REVERSE_ALPHABET[char]
