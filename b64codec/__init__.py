"""
Pure-Python base64 codec.

    >>> from b64codec import encode, decode
    >>> encode(b"Man")
    'TWFu'
    >>> decode("TQ==")
    b'M'
"""

from b64codec.codec import (
    ALPHABET,
    REVERSE_TABLE,
    build_reverse_table,
    decode,
    decoded_length,
    encode,
    encoded_length,
    ensure_valid,
    is_valid
)
from b64codec.errors import (
    CodecError,
    InvalidInputError,
    InvalidLengthError,
    InvalidCharacterError,
    InvalidPaddingError
)
from b64codec.utils.text import encode_text, decode_text

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "REVERSE_TABLE",
    "build_reverse_table",
    "decode",
    "decoded_length",
    "encode",
    "encoded_length",
    "ensure_valid",
    "is_valid",
    "encode_text",
    "decode_text",
    "CodecError",
    "InvalidInputError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "InvalidPaddingError",
]
