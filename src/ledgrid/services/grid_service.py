"""Grid service owning the LED toggle state."""

import logging
from dataclasses import dataclass

from ledgrid.encoding import encode, format_initializer
from ledgrid.models import LedGrid
from ledgrid.protocols import GridEvent, GridObserver
from ledgrid.utils import ObserverManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedGrid:
    """Result of encoding the grid on request."""

    words: list[str]
    text: str


class GridService:
    """
    Manages the on/off state of the LED grid.

    This service is the single writer of the grid. Every mutation emits a
    GridEvent to registered observers so the UI re-renders the affected
    cells immediately.

    Encoding is pull-based: nothing is computed until compute() is called.
    Toggling cells never produces words on its own.

    Threading:
        All methods are called from the UI thread (Textual's main loop).
    """

    def __init__(self, grid: LedGrid | None = None):
        """
        Initialize the grid service.

        Args:
            grid: Grid to manage. Defaults to an all-off grid.
        """
        self._grid = grid if grid is not None else LedGrid()
        self._observers = ObserverManager[GridObserver](observer_type_name="grid")
        logger.info("GridService initialized")

    @property
    def grid(self) -> LedGrid:
        """Get the grid (read-only access; mutate through service methods)."""
        return self._grid

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: GridObserver) -> None:
        """Register an observer to receive grid events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: GridObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify_observers(self, event: GridEvent, cell_indices: list[int], **kwargs) -> None:
        self._observers.notify('on_grid_event', event, cell_indices, self._grid, **kwargs)

    # =================================================================
    # Mutations
    # =================================================================

    def toggle(self, row: int, col: int) -> bool:
        """
        Flip one cell.

        Returns:
            The new state of the cell

        Raises:
            CellOutOfRangeError: If (row, col) is outside the grid
        """
        value = self._grid.toggle(row, col)
        index = self._grid.index_of(row, col)
        logger.debug(f"Toggled cell ({row}, {col}) -> {value}")
        self._notify_observers(GridEvent.CELL_TOGGLED, [index])
        return value

    def set_cell(self, row: int, col: int, value: bool) -> None:
        """Set one cell; fires CELL_TOGGLED only if the state changed."""
        if self._grid.get_cell(row, col) == bool(value):
            return
        self._grid.set_cell(row, col, value)
        self._notify_observers(GridEvent.CELL_TOGGLED, [self._grid.index_of(row, col)])

    def clear(self) -> None:
        """Turn every cell off."""
        self._grid.clear()
        logger.info("Grid cleared")
        self._notify_observers(GridEvent.GRID_CLEARED, list(range(self._grid.CELL_COUNT)))

    def fill(self) -> None:
        """Turn every cell on."""
        self._grid.fill()
        logger.info("Grid filled")
        self._notify_observers(GridEvent.GRID_FILLED, list(range(self._grid.CELL_COUNT)))

    def invert(self) -> None:
        """Flip every cell."""
        self._grid.invert()
        logger.info("Grid inverted")
        self._notify_observers(GridEvent.GRID_INVERTED, list(range(self._grid.CELL_COUNT)))

    # =================================================================
    # Queries
    # =================================================================

    def compute(self) -> EncodedGrid:
        """
        Encode the current grid into hexadecimal words.

        Returns:
            EncodedGrid with the word strings and their initializer text
        """
        words = encode(self._grid)
        result = EncodedGrid(words=words, text=format_initializer(words))
        logger.info(f"Computed words for {self._grid.lit_count} lit cells")
        self._notify_observers(GridEvent.ENCODED, [], result=result)
        return result
