"""
Exception classes raised by the base64 codec.

Decoding is relaxed by default and raises nothing for malformed input.
These exceptions are only raised when strict decoding is requested.
"""

class CodecError(Exception):
    """Base class for all codec exceptions."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message

class InvalidInputError(CodecError):
    """Raised when a string is not well-formed base64."""
    def __init__(self, message="Received malformed base64 input.", position=None):
        super().__init__(message)
        self.position = position

class InvalidLengthError(InvalidInputError):
    """Raised when the input length is not a multiple of 4."""
    def __init__(self, length):
        super().__init__(f"Base64 input length ({length}) is not a multiple of 4.")
        self.length = length

class InvalidCharacterError(InvalidInputError):
    """Raised when the input holds a character outside the base64 alphabet."""
    def __init__(self, char, position):
        super().__init__(f"Invalid base64 character {char!r} at position {position}.", position)
        self.char = char

class InvalidPaddingError(InvalidInputError):
    """Raised when '=' padding appears mid-string or exceeds two characters."""
    def __init__(self, position):
        super().__init__(f"Misplaced '=' padding at position {position}.", position)
