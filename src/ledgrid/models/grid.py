"""Grid model representing the 8x13 LED matrix."""

import logging
from collections.abc import Iterable, Sequence
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from ledgrid.exceptions import CellOutOfRangeError, GridShapeError

logger = logging.getLogger(__name__)


# Constants defined at module level for use in default_factory
ROWS = 8
COLS = 13
CELL_COUNT = ROWS * COLS  # 104


def _create_default_cells() -> list[bool]:
    """Create a fully unlit grid."""
    return [False] * CELL_COUNT


class LedGrid(BaseModel):
    """Represents the on/off state of every LED in the matrix.

    Cells are stored flat in row-major order: cell (row, col) lives at
    ``row * COLS + col``. The grid is never resized.
    """

    ROWS: ClassVar[int] = ROWS
    COLS: ClassVar[int] = COLS
    CELL_COUNT: ClassVar[int] = CELL_COUNT

    cells: list[bool] = Field(
        default_factory=_create_default_cells,
        description="Row-major cell states (104 total)",
    )

    @field_validator("cells")
    @classmethod
    def validate_cell_count(cls, v: list[bool]) -> list[bool]:
        """Ensure exactly 104 cells."""
        if len(v) != CELL_COUNT:
            raise GridShapeError(f"{CELL_COUNT} cells ({ROWS}x{COLS})", f"{len(v)} cells")
        return v

    # =================================================================
    # Coordinates
    # =================================================================

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) to a linear index."""
        if not (0 <= row < self.ROWS and 0 <= col < self.COLS):
            raise CellOutOfRangeError(self.ROWS, self.COLS, row=row, col=col)
        return row * self.COLS + col

    def position_of(self, index: int) -> tuple[int, int]:
        """Convert a linear index to (row, col)."""
        if not 0 <= index < self.CELL_COUNT:
            raise CellOutOfRangeError(self.ROWS, self.COLS, index=index)
        return divmod(index, self.COLS)

    # =================================================================
    # Cell access
    # =================================================================

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of the cell at (row, col)."""
        return self.cells[self.index_of(row, col)]

    def set_cell(self, row: int, col: int, value: bool) -> None:
        """Set the state of the cell at (row, col)."""
        self.cells[self.index_of(row, col)] = bool(value)

    def toggle(self, row: int, col: int) -> bool:
        """
        Flip the cell at (row, col).

        Returns:
            The new state of the cell
        """
        index = self.index_of(row, col)
        self.cells[index] = not self.cells[index]
        return self.cells[index]

    def clear(self) -> None:
        """Turn every cell off."""
        self.cells[:] = [False] * self.CELL_COUNT

    def fill(self) -> None:
        """Turn every cell on."""
        self.cells[:] = [True] * self.CELL_COUNT

    def invert(self) -> None:
        """Flip every cell."""
        self.cells[:] = [not cell for cell in self.cells]

    @property
    def lit_count(self) -> int:
        """Number of cells that are on."""
        return sum(self.cells)

    @property
    def lit_cells(self) -> list[tuple[int, int]]:
        """(row, col) of every cell that is on, in row-major order."""
        return [self.position_of(i) for i, lit in enumerate(self.cells) if lit]

    # =================================================================
    # Conversions
    # =================================================================

    def to_rows(self) -> list[list[bool]]:
        """Return the grid as a list of rows."""
        return [self.cells[r * self.COLS:(r + 1) * self.COLS] for r in range(self.ROWS)]

    def render_text(self, on: str = "#", off: str = ".") -> str:
        """Render one line of text per row."""
        return "\n".join(
            "".join(on if lit else off for lit in row) for row in self.to_rows()
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "LedGrid":
        """
        Create a grid from a list of rows.

        Raises:
            GridShapeError: If the rows are not exactly 8x13
        """
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            widths = sorted({len(row) for row in rows})
            raise GridShapeError(f"{ROWS}x{COLS}", f"{len(rows)} rows of width {widths}")
        return cls(cells=[bool(cell) for row in rows for cell in row])

    @classmethod
    def from_cells(cls, lit: Iterable[tuple[int, int]]) -> "LedGrid":
        """Create a grid with the given (row, col) cells turned on."""
        grid = cls()
        for row, col in lit:
            grid.set_cell(row, col, True)
        logger.debug(f"Created grid with {grid.lit_count} lit cells")
        return grid
