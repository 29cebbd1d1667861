"""Unit tests for the pydantic field type."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from zbase32codec import ZBase32Bytes, encode


class Token(BaseModel):
    """Model carrying a binary secret."""

    name: str
    secret: ZBase32Bytes


class TestZBase32Bytes:
    """Test validation and serialization of Z-Base-32 fields."""

    def test_validate_text(self) -> None:
        """Test Z-Base-32 text is decoded to whole bytes."""
        token = Token(name="t", secret="c3zs6")
        assert token.secret == b"foo"

    def test_validate_bytes(self) -> None:
        """Test raw bytes pass through unchanged."""
        token = Token(name="t", secret=b"\x00\xff")
        assert token.secret == b"\x00\xff"

    def test_validate_bytearray(self) -> None:
        """Test bytearray is converted to bytes."""
        token = Token(name="t", secret=bytearray(b"foo"))
        assert token.secret == b"foo"
        assert isinstance(token.secret, bytes)

    def test_validate_grouped_text(self) -> None:
        """Test hand-entered grouped text is accepted."""
        secret = bytes(range(10))
        text = encode(secret).decode("ascii").upper()
        grouped = "-".join(text[i : i + 4] for i in range(0, len(text), 4))
        assert Token(name="t", secret=grouped).secret == secret

    def test_invalid_text(self) -> None:
        """Test invalid symbols surface as a validation error."""
        with pytest.raises(ValidationError, match="Invalid Z-Base-32 symbol"):
            Token(name="t", secret="c3z!6")

    def test_invalid_type(self) -> None:
        """Test non-text, non-bytes values are rejected."""
        with pytest.raises(ValidationError):
            Token(name="t", secret=12345)

    def test_dump_python(self) -> None:
        """Test python-mode serialization emits text."""
        assert Token(name="t", secret=b"foo").model_dump() == {"name": "t", "secret": "c3zs6"}

    def test_dump_json(self) -> None:
        """Test JSON serialization emits text."""
        data = json.loads(Token(name="t", secret=b"foo").model_dump_json())
        assert data == {"name": "t", "secret": "c3zs6"}

    @pytest.mark.parametrize("length", range(0, 12))
    def test_roundtrip(self, length: int) -> None:
        """Test dumped models validate back to equal models."""
        token = Token(name="t", secret=bytes(range(200, 200 + length)))
        assert Token.model_validate(token.model_dump()) == token
        assert Token.model_validate_json(token.model_dump_json()) == token

    def test_json_schema(self) -> None:
        """Test the JSON schema describes a string."""
        schema = Token.model_json_schema()["properties"]["secret"]
        assert schema["type"] == "string"
        assert schema["format"] == "zbase32"
