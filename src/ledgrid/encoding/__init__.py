"""Grid to hexadecimal bitfield encoding."""

from .bitfield import (
    WORD_BITS,
    WORD_COUNT,
    decode,
    encode,
    encode_words,
    format_initializer,
    format_word,
    parse_word,
)

__all__ = [
    "WORD_BITS",
    "WORD_COUNT",
    "decode",
    "encode",
    "encode_words",
    "format_initializer",
    "format_word",
    "parse_word",
]
