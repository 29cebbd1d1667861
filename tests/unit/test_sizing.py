"""Unit tests for sizing utilities."""

from __future__ import annotations

import pytest

from zbase32codec import InvalidArgumentError
from zbase32codec.utils.sizing import (
    DECODED_JUMPS,
    MAX_SIGNIFICANT_BITS,
    decoded_byte_count,
    encoded_bits,
    encoded_symbol_count,
)


class TestEncodedSymbolCount:
    """Test symbol count calculation."""

    @pytest.mark.parametrize(
        "bits,expected",
        [
            (0, 0),
            (1, 1),
            (4, 1),
            (5, 1),
            (6, 2),
            (8, 2),
            (10, 2),
            (24, 5),
            (25, 5),
            (26, 6),
            (40, 8),
        ],
    )
    def test_known_counts(self, bits: int, expected: int) -> None:
        """Test spot values."""
        assert encoded_symbol_count(bits) == expected

    def test_ceiling_law(self) -> None:
        """Test count is ceil(bits / 5) across a range."""
        for bits in range(0, 500):
            assert encoded_symbol_count(bits) == -(-bits // 5)

    def test_maximum(self) -> None:
        """Test the largest accepted bit count."""
        assert encoded_symbol_count(MAX_SIGNIFICANT_BITS) == 429496730

    def test_encoded_bits(self) -> None:
        """Test encoded size in bits uses one byte per symbol."""
        assert encoded_bits(0) == 0
        assert encoded_bits(1) == 8
        assert encoded_bits(24) == 40
        assert encoded_bits(25) == 40
        assert encoded_bits(26) == 48


class TestDecodedByteCount:
    """Test decoded size calculation."""

    def test_jump_table(self) -> None:
        """Test the partial-group table."""
        assert DECODED_JUMPS == (0, 1, 2, 2, 3, 4, 4, 5)

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, 0),
            (1, 1),
            (2, 2),
            (3, 2),
            (4, 3),
            (5, 4),
            (6, 4),
            (7, 5),
            (8, 5),
            (9, 6),
            (16, 10),
            (17, 11),
        ],
    )
    def test_known_counts(self, count: int, expected: int) -> None:
        """Test spot values."""
        assert decoded_byte_count(count) == expected

    def test_partial_byte_included(self) -> None:
        """Test every symbol bit fits into the decoded buffer."""
        for count in range(0, 200):
            size = decoded_byte_count(count)
            assert size * 8 >= count * 5
            assert (size - 1) * 8 < count * 5 or size == 0

    def test_full_bytes_recovered(self) -> None:
        """Test encoding n whole bytes decodes into at least n bytes."""
        for length in range(0, 50):
            assert decoded_byte_count(encoded_symbol_count(length * 8)) >= length


class TestSizingErrors:
    """Test sizing argument validation."""

    @pytest.mark.parametrize("func", [encoded_symbol_count, encoded_bits, decoded_byte_count])
    def test_negative(self, func) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(InvalidArgumentError, match=">= 0"):
            func(-1)

    @pytest.mark.parametrize("func", [encoded_symbol_count, encoded_bits, decoded_byte_count])
    @pytest.mark.parametrize("value", [1.5, "8", None, True])
    def test_wrong_type(self, func, value) -> None:
        """Test non-integer counts are rejected."""
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            func(value)

    def test_too_many_bits(self) -> None:
        """Test bit counts above the maximum are rejected."""
        with pytest.raises(InvalidArgumentError, match="<="):
            encoded_symbol_count(MAX_SIGNIFICANT_BITS + 1)

    def test_too_many_symbols(self) -> None:
        """Test symbol counts above the maximum are rejected."""
        limit = encoded_symbol_count(MAX_SIGNIFICANT_BITS)
        assert decoded_byte_count(limit) > 0
        with pytest.raises(InvalidArgumentError, match="<="):
            decoded_byte_count(limit + 1)
