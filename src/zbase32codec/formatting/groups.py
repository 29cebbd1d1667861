"""Grouping and normalization of encoded text for human transcription.

Long Z-Base-32 strings are easier to read aloud and copy by hand when split
into short hyphen-separated chunks. Decoding such text first requires undoing
the grouping along with any case or whitespace changes.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union

from ..codec.alphabet import ALPHABET
from ..exceptions import InvalidArgumentError

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class GroupingConfig:
    """Configuration for splitting encoded text into groups.

    Attributes:
        size: Number of symbols per group (default 5)
        separator: Text placed between groups (default "-"). Must not contain
            alphabet symbols, otherwise grouped text could not be normalized.

    Examples:
        ```python
        from zbase32codec.formatting import GroupingConfig, group_symbols

        group_symbols(b"c3zs6ybndr")                       # 'c3zs6-ybndr'
        group_symbols(b"c3zs6ybndr", GroupingConfig(4, " "))  # 'c3zs 6ybn dr'
        ```
    """

    size: int = 5
    separator: str = "-"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise InvalidArgumentError(f"size must be an int >= 1, got {self.size!r}")

        if not isinstance(self.separator, str) or not self.separator:
            raise InvalidArgumentError(
                f"separator must be a non-empty string, got {self.separator!r}"
            )

        alphabet = ALPHABET.decode("ascii")
        if any(char in alphabet for char in self.separator.lower()):
            raise InvalidArgumentError(
                f"separator must not contain alphabet symbols, got {self.separator!r}"
            )


def group_symbols(
    symbols: Union[bytes, str], config: Optional[GroupingConfig] = None
) -> str:
    """Split encoded symbols into fixed-size groups.

    Args:
        symbols: Encoded text as returned by encode()
        config: Grouping options (default: groups of 5 joined by "-")

    Returns:
        Grouped text

    Example:
        >>> group_symbols(b"pb1sa5dxrb5s6hucco")
        'pb1sa-5dxrb-5s6hu-cco'
    """
    if config is None:
        config = GroupingConfig()
    if isinstance(symbols, (bytes, bytearray)):
        symbols = bytes(symbols).decode("ascii")

    chunks = [symbols[i : i + config.size] for i in range(0, len(symbols), config.size)]
    return config.separator.join(chunks)


def normalize_symbols(text: Union[bytes, str], separator: str = "-") -> bytes:
    """Prepare human-entered text for decode().

    Removes separators and ASCII whitespace and lowercases ASCII letters.
    Other characters, including non-ASCII letters, are left in place so
    decode() can report them.

    Args:
        text: Possibly grouped, padded or uppercased encoded text
        separator: Group separator to remove

    Returns:
        Symbols as bytes

    Example:
        >>> normalize_symbols(" PB1SA-5DXRB\\n")
        b'pb1sa5dxrb'
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    if separator:
        text = text.replace(separator, "")
    text = "".join(char for char in text if char not in string.whitespace)
    return text.translate(_ASCII_LOWER).encode("latin-1", errors="replace")
