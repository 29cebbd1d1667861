"""Pydantic integration for zbase32codec.

This module provides field types for carrying binary values as Z-Base-32
text inside Pydantic models.
"""

from __future__ import annotations

from .fields import ZBase32Bytes

__all__ = [
    "ZBase32Bytes",
]
