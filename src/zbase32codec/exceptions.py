"""Exception hierarchy for zbase32codec.

All exceptions inherit from ZBase32Error so callers can catch anything raised
by the package with a single except clause.
"""

from __future__ import annotations


class ZBase32Error(Exception):
    """Base exception for all zbase32codec errors."""

    pass


class InvalidArgumentError(ZBase32Error):
    """Raised when a caller passes an argument the codec cannot accept.

    Examples:
        - Negative or oversized significant bit count
        - Non-integer symbol count passed to a sizing helper
        - Input that is not bytes-like
        - Invalid grouping configuration
    """

    pass


class InvalidSymbolError(ZBase32Error):
    """Raised when decode input contains a character outside the alphabet.

    Attributes:
        symbol: The offending character
        position: Zero-based offset of the character in the input
    """

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Invalid Z-Base-32 symbol {symbol!r} at position {position}")
