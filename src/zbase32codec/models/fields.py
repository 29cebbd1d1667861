"""Pydantic field types backed by Z-Base-32.

This module provides an annotated bytes type that accepts either raw bytes or
Z-Base-32 text on validation and always serializes as Z-Base-32 text.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..exceptions import ZBase32Error
from ..formatting.groups import normalize_symbols


def _validate(value: Any) -> Any:
    """Decode Z-Base-32 text, pass raw bytes through unchanged.

    Only whole bytes are kept, so text produced by serialization validates
    back to the original value.
    """
    if isinstance(value, str):
        symbols = normalize_symbols(value)
        try:
            return decode(symbols)[: len(symbols) * 5 // 8]
        except ZBase32Error as err:
            # pydantic turns ValueError into a ValidationError
            raise ValueError(str(err)) from err
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def _serialize(value: bytes) -> str:
    return encode(value).decode("ascii")


ZBase32Bytes = Annotated[
    bytes,
    BeforeValidator(_validate),
    PlainSerializer(_serialize, return_type=str),
    WithJsonSchema({"type": "string", "format": "zbase32"}),
]
"""Bytes field carried as Z-Base-32 text.

Example:
    >>> from pydantic import BaseModel
    >>> class Token(BaseModel):
    ...     secret: ZBase32Bytes
    >>> Token(secret="c3zs6").secret
    b'foo'
    >>> Token(secret=b"foo").model_dump()
    {'secret': 'c3zs6'}
"""
