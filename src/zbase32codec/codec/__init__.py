"""Z-Base-32 codec for zbase32codec.

This module provides the encoder and decoder along with the alphabet tables
and the period-8 bit schedule they share.
"""

from __future__ import annotations

from .alphabet import ALPHABET, INVALID_SYMBOL, REVERSE_ALPHABET, symbol_index
from .decoder import decode, is_valid
from .encoder import encode
from .phases import PHASES, Phase

__all__ = [
    "encode",
    "decode",
    "is_valid",
    "ALPHABET",
    "REVERSE_ALPHABET",
    "INVALID_SYMBOL",
    "symbol_index",
    "PHASES",
    "Phase",
]
