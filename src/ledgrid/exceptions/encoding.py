"""Encoding-related exceptions.

- EncodingError: Base class for bitfield encoding/decoding errors
- WordRangeError: An integer does not fit in an unsigned 32-bit word
- InvalidWordError: Text is not a hexadecimal word, or sets unused padding bits
- WordCountError: Decoding was given the wrong number of words
"""

from .base import LedGridError


class EncodingError(LedGridError):
    """Bitfield encoding or decoding failed."""
    pass


class WordRangeError(EncodingError, ValueError):
    """Integer is outside the unsigned 32-bit range."""

    def __init__(self, value: int):
        super().__init__(
            user_message=f"Value {value} does not fit in a 32-bit word",
            recovery_hint="Words must be between 0x00000000 and 0xFFFFFFFF",
        )
        self.value = value


class InvalidWordError(EncodingError, ValueError):
    """Text could not be read as a hexadecimal word."""

    def __init__(self, text: str, reason: str = "not a 32-bit hexadecimal word"):
        super().__init__(
            user_message=f"Invalid word {text!r}: {reason}",
            recoverable=True,
            recovery_hint="Use the 0xXXXXXXXX form, e.g. 0x0000001F",
        )
        self.text = text
        self.reason = reason


class WordCountError(EncodingError, ValueError):
    """Wrong number of words for the grid."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            user_message=f"Expected {expected} words, got {actual}",
            recoverable=True,
            recovery_hint=f"Pass all {expected} words, in order from word 0",
        )
        self.expected = expected
        self.actual = actual
