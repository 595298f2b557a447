"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from ledgrid.exceptions import CellOutOfRangeError, GridShapeError
from ledgrid.models import AppConfig, Color, LedGrid


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        color = Color(r=100, g=50, b=25)
        assert color.to_rgb_tuple() == (100, 50, 25)

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_hex_round_trip(self):
        assert Color(r=0, g=0, b=255).to_hex() == "#0000FF"
        assert Color.from_hex("#4C4C4C") == Color(r=76, g=76, b=76)

    @pytest.mark.unit
    def test_from_hex_rejects_bad_length(self):
        with pytest.raises(ValueError):
            Color.from_hex("#FFF")

    @pytest.mark.unit
    def test_frozen(self):
        color = Color.off()
        with pytest.raises(ValidationError):
            color.r = 10


class TestLedGrid:
    """Test LedGrid model."""

    @pytest.mark.unit
    def test_default_is_all_off(self, empty_grid):
        assert len(empty_grid.cells) == 104
        assert empty_grid.lit_count == 0
        assert not any(empty_grid.cells)

    @pytest.mark.unit
    def test_wrong_cell_count_rejected(self):
        with pytest.raises(ValidationError):
            LedGrid(cells=[False] * 103)

    @pytest.mark.unit
    def test_linear_index_is_row_major(self, empty_grid):
        assert empty_grid.index_of(0, 0) == 0
        assert empty_grid.index_of(0, 12) == 12
        assert empty_grid.index_of(1, 0) == 13
        assert empty_grid.index_of(2, 5) == 31
        assert empty_grid.index_of(2, 6) == 32
        assert empty_grid.index_of(7, 12) == 103

    @pytest.mark.unit
    def test_position_of_inverts_index_of(self, empty_grid):
        for index in range(104):
            row, col = empty_grid.position_of(index)
            assert empty_grid.index_of(row, col) == index

    @pytest.mark.unit
    @pytest.mark.parametrize("row,col", [(-1, 0), (8, 0), (0, -1), (0, 13)])
    def test_out_of_range_coordinates(self, empty_grid, row, col):
        with pytest.raises(CellOutOfRangeError):
            empty_grid.get_cell(row, col)
        with pytest.raises(IndexError):
            empty_grid.toggle(row, col)

    @pytest.mark.unit
    def test_position_of_out_of_range(self, empty_grid):
        with pytest.raises(CellOutOfRangeError) as exc_info:
            empty_grid.position_of(104)
        assert exc_info.value.index == 104

    @pytest.mark.unit
    def test_toggle(self, empty_grid):
        assert empty_grid.toggle(3, 4) is True
        assert empty_grid.get_cell(3, 4) is True
        assert empty_grid.toggle(3, 4) is False
        assert empty_grid.get_cell(3, 4) is False

    @pytest.mark.unit
    def test_cells_are_independent(self, empty_grid):
        empty_grid.toggle(0, 0)
        empty_grid.set_cell(7, 12, True)
        assert empty_grid.lit_cells == [(0, 0), (7, 12)]

    @pytest.mark.unit
    def test_clear_fill_invert(self, empty_grid):
        empty_grid.fill()
        assert empty_grid.lit_count == 104

        empty_grid.clear()
        assert empty_grid.lit_count == 0

        empty_grid.set_cell(1, 1, True)
        empty_grid.invert()
        assert empty_grid.lit_count == 103
        assert empty_grid.get_cell(1, 1) is False

    @pytest.mark.unit
    def test_rows_round_trip(self):
        grid = LedGrid.from_cells([(0, 0), (4, 6)])
        rows = grid.to_rows()

        assert len(rows) == 8
        assert all(len(row) == 13 for row in rows)
        assert LedGrid.from_rows(rows) == grid

    @pytest.mark.unit
    def test_from_rows_wrong_shape(self):
        with pytest.raises(GridShapeError):
            LedGrid.from_rows([[False] * 13] * 7)
        with pytest.raises(GridShapeError):
            LedGrid.from_rows([[False] * 12] * 8)

    @pytest.mark.unit
    def test_render_text(self):
        grid = LedGrid.from_cells([(0, 0), (7, 12)])
        lines = grid.render_text().splitlines()

        assert len(lines) == 8
        assert lines[0] == "#" + "." * 12
        assert lines[7] == "." * 12 + "#"
        assert grid.render_text(on="1", off="0").splitlines()[0] == "1" + "0" * 12


class TestAppConfig:
    """Test AppConfig model and its persistence."""

    @pytest.mark.unit
    def test_defaults(self, config):
        assert config.lit_color.to_hex() == "#0000FF"
        assert config.unlit_color.to_hex() == "#4C4C4C"
        assert config.show_indices is False

    @pytest.mark.unit
    def test_load_or_default_creates_file(self, config_path):
        assert not config_path.exists()

        loaded = AppConfig.load_or_default(config_path)

        assert loaded == AppConfig()
        assert config_path.exists()

    @pytest.mark.unit
    def test_save_and_load(self, config_path):
        custom = AppConfig(lit_color=Color(r=255, g=0, b=0), show_indices=True)
        custom.save(config_path)

        assert AppConfig.load_or_default(config_path) == custom
