"""Observer protocol definitions for grid events."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import GridEvent

if TYPE_CHECKING:
    from ledgrid.models import LedGrid


@runtime_checkable
class GridObserver(Protocol):
    """
    Observer that receives grid state changes.

    Lets the UI stay in sync with the grid service without the service
    knowing anything about widgets.
    """

    def on_grid_event(
        self, event: GridEvent, cell_indices: list[int], grid: "LedGrid", **kwargs
    ) -> None:
        """
        Handle grid events.

        Args:
            event: The type of grid event
            cell_indices: Linear indices of the affected cells (all cells for bulk events,
                empty for ENCODED)
            grid: The grid after the change
            **kwargs: Event-specific data (ENCODED carries ``result``)
        """
        ...
