"""Utility functions for zbase32codec.

This module provides size calculations for encoded and decoded buffers.
"""

from __future__ import annotations

from .sizing import (
    DECODED_JUMPS,
    MAX_SIGNIFICANT_BITS,
    decoded_byte_count,
    encoded_bits,
    encoded_symbol_count,
)

__all__ = [
    "encoded_symbol_count",
    "encoded_bits",
    "decoded_byte_count",
    "DECODED_JUMPS",
    "MAX_SIGNIFICANT_BITS",
]
