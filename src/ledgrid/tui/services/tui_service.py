"""Service for keeping the TUI in sync with the grid."""

import logging
from typing import TYPE_CHECKING

from ledgrid.protocols import GridEvent, GridObserver
from ledgrid.tui.widgets import CellGrid, ResultPanel, StatusBar

if TYPE_CHECKING:
    from ledgrid.models import LedGrid
    from ledgrid.tui.app import LedGridApp

logger = logging.getLogger(__name__)


class TUIService(GridObserver):
    """
    Synchronizes the terminal UI with grid state.

    Observes the grid service and repaints affected cells, refreshes the
    status bar, and shows computed words. Widgets never read the service
    directly.
    """

    def __init__(self, app: "LedGridApp"):
        """
        Initialize the TUI service.

        Args:
            app: The LedGridApp application instance
        """
        self.app = app
        self._computed = False
        self._stale = False
        logger.info("TUIService initialized")

    def on_grid_event(
        self, event: GridEvent, cell_indices: list[int], grid: "LedGrid", **kwargs
    ) -> None:
        """
        Handle grid events.

        Args:
            event: The type of grid event
            cell_indices: Linear indices of the affected cells
            grid: The grid after the change
            **kwargs: Event-specific data
        """
        try:
            if event == GridEvent.ENCODED:
                self._handle_encoded(kwargs["result"].text)
            else:
                self._handle_cells_changed(cell_indices, grid)

            self._update_status(grid)

        except Exception as e:
            logger.error(f"Error handling grid event {event}: {e}")

    def sync_all(self, grid: "LedGrid") -> None:
        """Repaint every cell and the status bar from the grid."""
        self._handle_cells_changed(list(range(grid.CELL_COUNT)), grid)
        self._update_status(grid)

    def _handle_cells_changed(self, cell_indices: list[int], grid: "LedGrid") -> None:
        cell_grid = self.app.query_one(CellGrid)
        for index in cell_indices:
            cell_grid.update_cell(index, grid.cells[index])

        if self._computed:
            self._stale = True

    def _handle_encoded(self, text: str) -> None:
        self.app.query_one(ResultPanel).show_result(text)
        self._computed = True
        self._stale = False

    def _update_status(self, grid: "LedGrid") -> None:
        self.app.query_one(StatusBar).update_state(
            lit=grid.lit_count, computed=self._computed, stale=self._stale
        )
