"""Grid-related exceptions.

- GridError: Base class for grid errors
- CellOutOfRangeError: A (row, col) pair or linear index falls outside the grid
- GridShapeError: Cell data does not match the fixed grid dimensions
"""

from typing import Optional

from .base import LedGridError


class GridError(LedGridError):
    """Grid state or coordinates are invalid."""
    pass


class CellOutOfRangeError(GridError, IndexError):
    """Cell coordinates are outside the grid."""

    def __init__(self, rows: int, cols: int, row: Optional[int] = None, col: Optional[int] = None,
                 index: Optional[int] = None):
        """
        Initialize cell out of range error.

        Args:
            rows: Number of rows in the grid
            cols: Number of columns in the grid
            row: Offending row (when addressed by coordinates)
            col: Offending column (when addressed by coordinates)
            index: Offending linear index (when addressed by index)
        """
        if index is not None:
            user_msg = f"Cell index {index} is out of range (0-{rows * cols - 1})"
        else:
            user_msg = f"Cell ({row}, {col}) is out of range"

        super().__init__(
            user_message=user_msg,
            technical_message=f"{user_msg} for a {rows}x{cols} grid",
            recoverable=True,
            recovery_hint=f"Rows must be 0-{rows - 1} and columns 0-{cols - 1}",
        )
        self.row = row
        self.col = col
        self.index = index


class GridShapeError(GridError, ValueError):
    """Cell data has the wrong number of rows, columns or cells."""

    def __init__(self, expected: str, actual: str):
        """
        Initialize grid shape error.

        Args:
            expected: Description of the expected shape (e.g. "8x13")
            actual: Description of what was given
        """
        super().__init__(
            user_message=f"Grid must be {expected}, got {actual}",
            recoverable=True,
            recovery_hint=f"Provide exactly {expected} cells",
        )
        self.expected = expected
        self.actual = actual
