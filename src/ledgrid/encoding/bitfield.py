"""Bitfield encoding of the LED grid into 32-bit hexadecimal words.

Cell (row, col) has linear index ``i = row * COLS + col`` and is stored in
bit ``i % 32`` of word ``i // 32``. With 104 cells that gives four words;
word 3 only uses its low 8 bits and the upper 24 are always zero.

The text form is what LED driver firmware expects in an array initializer::

    0x80000001,
    0x00000000,
    0x00000000,
    0x00000000
"""

import logging
import re
from collections.abc import Sequence

from ledgrid.exceptions import InvalidWordError, WordCountError, WordRangeError
from ledgrid.models.grid import CELL_COUNT, LedGrid

logger = logging.getLogger(__name__)

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
WORD_COUNT = -(-CELL_COUNT // WORD_BITS)  # ceil(104 / 32) = 4

# Bits of the last word that map onto real cells
LAST_WORD_BITS = CELL_COUNT - (WORD_COUNT - 1) * WORD_BITS
LAST_WORD_MASK = (1 << LAST_WORD_BITS) - 1

_HEX_WORD = re.compile(r"^(?:0[xX])?([0-9a-fA-F]{1,8})$")


def encode_words(grid: LedGrid) -> list[int]:
    """Pack the grid into WORD_COUNT unsigned 32-bit integers."""
    words = [0] * WORD_COUNT
    for row in range(grid.ROWS):
        for col in range(grid.COLS):
            index = row * grid.COLS + col
            if grid.cells[index]:
                words[index // WORD_BITS] |= 1 << (index % WORD_BITS)
    return words


def format_word(word: int) -> str:
    """
    Format a word as ``0x`` followed by 8 uppercase hex digits.

    Raises:
        WordRangeError: If the value does not fit in 32 unsigned bits
    """
    if not 0 <= word <= WORD_MASK:
        raise WordRangeError(word)
    return f"0x{word:08X}"


def encode(grid: LedGrid) -> list[str]:
    """
    Encode the grid as hexadecimal word strings, word 0 first.

    Example:
        >>> encode(LedGrid.from_cells([(0, 0)]))
        ['0x00000001', '0x00000000', '0x00000000', '0x00000000']
    """
    words = [format_word(word) for word in encode_words(grid)]
    logger.debug(f"Encoded {grid.lit_count} lit cells as {words}")
    return words


def format_initializer(words: Sequence[str]) -> str:
    """Join words one per line, with a comma after every word but the last."""
    return ",\n".join(words)


def parse_word(text: str) -> int:
    """
    Parse a single hexadecimal word.

    Accepts ``0x``-prefixed or bare hex, surrounding whitespace and one
    trailing comma, so lines copied from an initializer parse directly.

    Raises:
        InvalidWordError: If the text is not a 32-bit hexadecimal word
    """
    stripped = text.strip()
    if stripped.endswith(","):
        stripped = stripped[:-1].rstrip()

    match = _HEX_WORD.match(stripped)
    if match is None:
        raise InvalidWordError(text)
    return int(match.group(1), 16)


def decode(words: Sequence[int | str]) -> LedGrid:
    """
    Rebuild a grid from its encoded words.

    Args:
        words: WORD_COUNT words, as integers or hex strings, word 0 first

    Raises:
        WordCountError: If the number of words is wrong
        InvalidWordError: If a word can't be parsed or sets bits beyond the last cell
        WordRangeError: If an integer word is outside the 32-bit range
    """
    if len(words) != WORD_COUNT:
        raise WordCountError(WORD_COUNT, len(words))

    values: list[int] = []
    for word in words:
        if isinstance(word, str):
            value = parse_word(word)
        else:
            value = int(word)
            if not 0 <= value <= WORD_MASK:
                raise WordRangeError(value)
        values.append(value)

    if values[-1] & ~LAST_WORD_MASK:
        raise InvalidWordError(
            format_word(values[-1]), "sets bits beyond the last cell"
        )

    cells = [
        bool(values[index // WORD_BITS] >> (index % WORD_BITS) & 1)
        for index in range(CELL_COUNT)
    ]
    return LedGrid(cells=cells)
