"""Core module for testing the text helpers."""

import base64

import pytest

from b64codec.errors import InvalidLengthError
from b64codec.utils.text import encode_text, decode_text


@pytest.mark.parametrize("text", ["", "Man", "héllo wörld", "日本語", "line\nbreak"])
def test_text__round_trip(text):
    encoded = encode_text(text)
    assert encoded == base64.b64encode(text.encode("utf-8")).decode("ascii")
    assert decode_text(encoded) == text


def test_encode_text__other_encoding():
    assert encode_text("é", encoding="latin-1") == "6Q=="
    assert decode_text("6Q==", encoding="latin-1") == "é"


def test_decode_text__invalid_utf8_propagates():
    with pytest.raises(UnicodeDecodeError):
        decode_text("/w==")


def test_decode_text__strict_from_environment(monkeypatch):
    """Test that B64_STRICT_DECODE turns on validation when not given explicitly."""
    assert decode_text("TWF") == "Ma"

    monkeypatch.setenv("B64_STRICT_DECODE", "true")
    with pytest.raises(InvalidLengthError):
        decode_text("TWF")
    assert decode_text("TWF", validate=False) == "Ma"
