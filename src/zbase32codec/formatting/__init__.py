"""Human transcription helpers for zbase32codec.

This module provides grouping of encoded text into short chunks and
normalization of hand-entered text before decoding.
"""

from __future__ import annotations

from .groups import GroupingConfig, group_symbols, normalize_symbols

__all__ = [
    "GroupingConfig",
    "group_symbols",
    "normalize_symbols",
]
