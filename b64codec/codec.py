"""
Base64 encoding and decoding of in-memory byte buffers.

This module implements the standard base64 alphabet by hand:
- encode: bytes -> base64 text, padded with '=' to a multiple of 4
- decode: base64 text -> bytes

Decoding is relaxed by default: the caller is trusted to pass well-formed
base64. Characters outside the alphabet, and positions past the end of the
string, count as 0 and produce garbage rather than an error. Pass
validate=True to get an InvalidInputError instead.

Constants:
    ALPHABET (str): The 64 data symbols followed by the padding character
    REVERSE_TABLE (tuple): Character code (0-255) -> 6-bit value, -1 if unmapped
"""

import logging

from b64codec import config
from b64codec.errors import (
    InvalidInputError,
    InvalidLengthError,
    InvalidCharacterError,
    InvalidPaddingError
)

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/='
PAD = '='
SYMBOL_COUNT = 64
TABLE_SIZE = 256

_WORD_MASK = 0xFFFFFFFF  # the accumulator is a 32-bit register


def build_reverse_table() -> tuple:
    """
    Build the character code -> 6-bit value lookup table.

    Only the 64 data symbols are mapped; the padding character stays
    unmapped since it is stripped before any lookup.

    Returns:
        tuple: TABLE_SIZE entries, -1 for codes outside the alphabet
    """
    table = [-1] * TABLE_SIZE
    for value, char in enumerate(ALPHABET[:SYMBOL_COUNT]):
        table[ord(char)] = value
    return tuple(table)


REVERSE_TABLE = build_reverse_table()


def _log(prefix, data, max_to_print=40):
    if not config.codec_debug():
        return
    logging.debug(f"{prefix}({len(data)})>>>{data[:max_to_print]!r}")


def _symbol_value(char: str) -> int:
    code = ord(char)
    if code >= TABLE_SIZE:
        return -1
    return REVERSE_TABLE[code]


def _lookup(base64_string: str, index: int) -> int:
    # Out-of-range positions and unknown characters read as 0
    if index >= len(base64_string):
        return 0
    return max(_symbol_value(base64_string[index]), 0)


def _unpadded_length(base64_string: str) -> int:
    str_len = len(base64_string)
    while str_len > 0 and base64_string[str_len - 1] == PAD:
        str_len -= 1
    return str_len


def ensure_valid(base64_string: str) -> None:
    """
    Check that a string is well-formed, padded base64.

    Args:
        base64_string: Text to check

    Raises:
        InvalidLengthError: Length is not a multiple of 4
        InvalidPaddingError: '=' appears before the last two positions,
            or is followed by a data symbol
        InvalidCharacterError: A character is outside the alphabet
    """
    length = len(base64_string)
    if length % 4 != 0:
        raise InvalidLengthError(length)

    for position, char in enumerate(base64_string):
        if char == PAD:
            if position < length - 2 or base64_string[position:].strip(PAD):
                raise InvalidPaddingError(position)
            break
        if _symbol_value(char) < 0:
            raise InvalidCharacterError(char, position)


def is_valid(base64_string: str) -> bool:
    """Return True if the string would pass strict decoding."""
    try:
        ensure_valid(base64_string)
    except InvalidInputError:
        return False
    return True


def encoded_length(size: int) -> int:
    """Length of the base64 text produced for `size` input bytes."""
    if size < 0:
        raise ValueError("size must be non-negative")
    return (size + 2) // 3 * 4


def decoded_length(base64_string: str) -> int:
    """Number of bytes decode() returns for this string."""
    return _unpadded_length(base64_string) * 6 // 8


def decode(base64_string: str, validate: bool = False) -> bytes:
    """
    Decode base64 text into a new bytes object.

    The input is walked in full 4-character groups. Trailing padding only
    shortens the output buffer, so bytes that would come from '=' are
    never emitted.

    Args:
        base64_string: Padded base64 text
        validate: Raise InvalidInputError on malformed input instead of
            returning garbage (default: False)

    Returns:
        bytes: The decoded data
    """
    if validate:
        ensure_valid(base64_string)

    str_len = _unpadded_length(base64_string)
    output = bytearray(str_len * 6 // 8)
    out_len = len(output)
    out_index = 0

    for i in range(0, str_len, 4):
        all_bits = (
            (_lookup(base64_string, i) << 18)
            | (_lookup(base64_string, i + 1) << 12)
            | (_lookup(base64_string, i + 2) << 6)
            | _lookup(base64_string, i + 3)
        )

        for shift in (16, 8, 0):
            if out_index < out_len:
                output[out_index] = (all_bits >> shift) & 0xFF
                out_index += 1

    _log("Decode", output)
    return bytes(output)


def encode(data) -> str:
    """
    Encode a byte buffer as padded base64 text.

    Bytes are shifted into the high end of a 32-bit accumulator and drained
    6 bits at a time from the top.

    Args:
        data: bytes, bytearray, memoryview or an iterable of ints in 0..255

    Returns:
        str: Base64 text, length always a multiple of 4

    Raises:
        TypeError: data is text or an int rather than a byte buffer
    """
    if isinstance(data, (str, int)):
        raise TypeError(f"encode() expects a byte buffer, not {type(data).__name__}")
    data = bytes(data)

    arr_len = len(data)
    chars = []
    bits = 0
    num_bits = 0
    arr_index = 0

    while arr_index < arr_len or num_bits > 0:
        if num_bits < 6:
            while num_bits <= 24 and arr_index < arr_len:
                bits |= data[arr_index] << (24 - num_bits)
                arr_index += 1
                num_bits += 8
        chars.append(ALPHABET[bits >> 26])
        bits = (bits << 6) & _WORD_MASK
        num_bits -= 6

    while len(chars) & 3:
        chars.append(PAD)

    _log("Encode", data)
    return ''.join(chars)
