"""Unit tests for the grid to hex word encoder."""

import pytest

from ledgrid.encoding import (
    WORD_BITS,
    WORD_COUNT,
    decode,
    encode,
    encode_words,
    format_initializer,
    format_word,
    parse_word,
)
from ledgrid.exceptions import InvalidWordError, WordCountError, WordRangeError
from ledgrid.models import CELL_COUNT, COLS, ROWS, LedGrid

ZERO = "0x00000000"


class TestWordLayout:
    """Test the relationship between grid size and word count."""

    @pytest.mark.unit
    def test_word_count_matches_grid(self):
        """Four words cover 104 cells."""
        assert ROWS * COLS == CELL_COUNT == 104
        assert WORD_BITS == 32
        assert WORD_COUNT == 4
        assert (WORD_COUNT - 1) * WORD_BITS < CELL_COUNT <= WORD_COUNT * WORD_BITS

    @pytest.mark.unit
    def test_last_cell_lands_in_word_3_bit_7(self):
        """Cell (7, 12) is index 103 -> word 3, bit 7."""
        grid = LedGrid.from_cells([(7, 12)])
        assert grid.index_of(7, 12) == 103
        assert encode_words(grid) == [0, 0, 0, 1 << 7]


class TestEncode:
    """Test encode() against known patterns."""

    @pytest.mark.unit
    def test_all_off(self, empty_grid):
        assert encode(empty_grid) == [ZERO, ZERO, ZERO, ZERO]

    @pytest.mark.unit
    def test_all_on(self, full_grid):
        """Word 3 only has 8 meaningful bits."""
        assert encode(full_grid) == ["0xFFFFFFFF", "0xFFFFFFFF", "0xFFFFFFFF", "0x000000FF"]

    @pytest.mark.unit
    def test_first_cell(self):
        grid = LedGrid.from_cells([(0, 0)])
        assert encode(grid) == ["0x00000001", ZERO, ZERO, ZERO]

    @pytest.mark.unit
    def test_top_bit_of_word_0(self):
        """Cell (2, 5) is index 31."""
        grid = LedGrid.from_cells([(2, 5)])
        assert encode(grid) == ["0x80000000", ZERO, ZERO, ZERO]

    @pytest.mark.unit
    def test_bottom_bit_of_word_1(self):
        """Cell (2, 6) is index 32."""
        grid = LedGrid.from_cells([(2, 6)])
        assert encode(grid) == [ZERO, "0x00000001", ZERO, ZERO]

    @pytest.mark.unit
    def test_first_row(self):
        """The 13 cells of row 0 are bits 0-12 of word 0."""
        grid = LedGrid.from_cells([(0, col) for col in range(COLS)])
        assert encode(grid) == ["0x00001FFF", ZERO, ZERO, ZERO]

    @pytest.mark.unit
    def test_words_are_uppercase_and_padded(self):
        grid = LedGrid.from_cells([(0, 1), (0, 3), (0, 5), (0, 7)])
        words = encode(grid)
        assert words[0] == "0x000000AA"
        assert all(len(word) == 10 and word.startswith("0x") for word in words)

    @pytest.mark.unit
    def test_encoding_is_idempotent(self):
        """Encoding twice without a change gives the same words."""
        grid = LedGrid.from_cells([(1, 1), (4, 9), (7, 12)])
        first = encode(grid)
        second = encode(grid)
        assert first == second
        assert grid.lit_cells == [(1, 1), (4, 9), (7, 12)]

    @pytest.mark.unit
    def test_word_order_is_stable(self):
        """Word 0 always comes first regardless of which cells are set."""
        grid = LedGrid.from_cells([(7, 12), (0, 0)])
        assert encode(grid) == ["0x00000001", ZERO, ZERO, "0x00000080"]


class TestFormatting:
    """Test word and initializer formatting."""

    @pytest.mark.unit
    def test_format_word(self):
        assert format_word(0) == ZERO
        assert format_word(0x1F) == "0x0000001F"
        assert format_word(0xFFFFFFFF) == "0xFFFFFFFF"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [-1, 1 << 32])
    def test_format_word_out_of_range(self, value):
        with pytest.raises(WordRangeError):
            format_word(value)

    @pytest.mark.unit
    def test_initializer_has_comma_on_all_but_last(self):
        text = format_initializer(["0x00000001", ZERO, ZERO, "0x00000080"])
        assert text == "0x00000001,\n0x00000000,\n0x00000000,\n0x00000080"

    @pytest.mark.unit
    def test_initializer_line_count(self, full_grid):
        lines = format_initializer(encode(full_grid)).splitlines()
        assert len(lines) == 4
        assert [line.endswith(",") for line in lines] == [True, True, True, False]


class TestParseWord:
    """Test parsing words typed or pasted by users."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0x0000001F", 0x1F),
            ("0X80000000", 0x80000000),
            ("ff", 0xFF),
            ("  0x00000001,  ", 1),
            ("0x1", 1),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_word(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "0x", "0x123456789", "0xGG", "12,34", "0x1,,"])
    def test_invalid(self, text):
        with pytest.raises(InvalidWordError):
            parse_word(text)


class TestDecode:
    """Test rebuilding a grid from words."""

    @pytest.mark.unit
    def test_round_trip(self):
        """Decoding the encoded words reproduces the grid exactly."""
        lit = [(0, 0), (0, 12), (2, 5), (2, 6), (3, 3), (5, 10), (7, 0), (7, 12)]
        grid = LedGrid.from_cells(lit)

        decoded = decode(encode(grid))

        assert decoded == grid
        assert decoded.to_rows() == grid.to_rows()

    @pytest.mark.unit
    def test_round_trip_full_and_empty(self, empty_grid, full_grid):
        assert decode(encode(empty_grid)) == empty_grid
        assert decode(encode(full_grid)) == full_grid

    @pytest.mark.unit
    def test_decode_integers(self):
        grid = decode([0x80000000, 0, 0, 0])
        assert grid.lit_cells == [(2, 5)]

    @pytest.mark.unit
    def test_decode_initializer_lines(self):
        text = "0x00000000,\n0x00000001,\n0x00000000,\n0x00000000"
        grid = decode(text.splitlines())
        assert grid.lit_cells == [(2, 6)]

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 3, 5])
    def test_wrong_word_count(self, count):
        with pytest.raises(WordCountError) as exc_info:
            decode([ZERO] * count)
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == count

    @pytest.mark.unit
    def test_padding_bits_rejected(self):
        """Bits 8-31 of word 3 don't map to any cell."""
        with pytest.raises(InvalidWordError):
            decode([ZERO, ZERO, ZERO, "0x00000100"])

    @pytest.mark.unit
    def test_integer_out_of_range(self):
        with pytest.raises(WordRangeError):
            decode([1 << 32, 0, 0, 0])
