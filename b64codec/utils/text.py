"""
Base64 helpers for text, with UTF-8 handling.

Thin wrappers around the codec that take care of the str <-> bytes step.
Useful for:
- Carrying text through channels that only accept ASCII
- Storing short strings in text-based formats
"""

from typing import Optional

from b64codec import codec, config

def encode_text(text: str, encoding: str = 'utf-8') -> str:
    """
    Encode a string to base64.

    Args:
        text: String to encode
        encoding: Character encoding applied before encoding (default: utf-8)

    Returns:
        str: Base64 text
    """
    return codec.encode(text.encode(encoding))

def decode_text(encoded: str, encoding: str = 'utf-8', validate: Optional[bool] = None) -> str:
    """
    Decode base64 text back to a string.

    Args:
        encoded: Base64 text to decode
        encoding: Character encoding of the decoded bytes (default: utf-8)
        validate: Strict decoding; None falls back to B64_STRICT_DECODE

    Returns:
        str: Decoded string
    """
    if validate is None:
        validate = config.strict_decode()
    return codec.decode(encoded, validate=validate).decode(encoding)
