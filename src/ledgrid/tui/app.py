"""Main TUI application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header

from ledgrid.models import AppConfig
from ledgrid.services import EncodedGrid, GridService

from .decorators import handle_action_errors
from .services import TUIService
from .widgets import CellGrid, ClearConfirmationModal, ResultPanel, StatusBar

logger = logging.getLogger(__name__)

COMPUTE_LABEL = "Show lit LEDs in maxWrite() format"


class LedGridApp(App):
    """
    Textual TUI for composing LED patterns.

    A pure UI layer: the GridService owns the grid and every mutation
    goes through it, and TUIService repaints widgets from its events.

    Click a cell to toggle it. Words are computed only when asked for
    (button or Enter); toggling leaves the previous words on screen.
    """

    TITLE = "LED Grid"
    SUB_TITLE = "8 x 13 bitfield"

    DEFAULT_CSS = """
    #main {
        height: 1fr;
    }

    #compute-btn {
        width: 100%;
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("enter", "compute", "Show Words", show=True),
        Binding("w", "compute", "Show Words", show=False),
        Binding("c", "clear", "Clear", show=True),
        Binding("f", "fill", "Fill", show=True),
        Binding("i", "invert", "Invert", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        grid_service: Optional[GridService] = None,
    ):
        """
        Initialize the Textual UI application.

        Args:
            config: Application configuration (defaults when None)
            grid_service: Service owning the grid (a fresh all-off grid when None)
        """
        super().__init__()
        self.config = config or AppConfig()
        self.grid_service = grid_service or GridService()
        self.tui_service = TUIService(self)
        self.last_result: Optional[EncodedGrid] = None
        logger.info("LedGridApp created")

    # =================================================================
    # Textual Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield Header()

        with Vertical(id="main"):
            yield CellGrid()
            yield Button(COMPUTE_LABEL, variant="primary", id="compute-btn")
            yield ResultPanel()

        yield StatusBar(total=self.grid_service.grid.CELL_COUNT)
        yield Footer()

    def on_mount(self) -> None:
        """Build the cell widgets and start listening to the grid service."""
        grid = self.query_one(CellGrid)
        grid.initialize_cells(self.grid_service.grid, self.config)

        self.grid_service.register_observer(self.tui_service)
        self.tui_service.sync_all(self.grid_service.grid)
        logger.info("TUI mount complete")

    def on_unmount(self) -> None:
        self.grid_service.unregister_observer(self.tui_service)
        logger.info("TUI unmounted")

    # =================================================================
    # Widget Message Handlers
    # =================================================================

    @handle_action_errors("toggle cell")
    def on_cell_grid_cell_clicked(self, message: CellGrid.CellClicked) -> None:
        """Toggle the clicked cell."""
        self.grid_service.toggle(message.row, message.col)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "compute-btn":
            self.action_compute()

    # =================================================================
    # User Actions
    # =================================================================

    @handle_action_errors("compute words")
    def action_compute(self) -> None:
        """Encode the grid and show the words."""
        self.last_result = self.grid_service.compute()

    def action_clear(self) -> None:
        """Turn every cell off, asking first if anything is lit."""
        lit_count = self.grid_service.grid.lit_count
        if lit_count == 0:
            self.notify("Grid is already clear", severity="warning")
            return

        def handle_confirmation(confirmed: bool) -> None:
            if confirmed:
                self.grid_service.clear()
                self.notify("Grid cleared")

        self.push_screen(ClearConfirmationModal(lit_count), handle_confirmation)

    def action_fill(self) -> None:
        """Turn every cell on."""
        self.grid_service.fill()

    def action_invert(self) -> None:
        """Flip every cell."""
        self.grid_service.invert()
