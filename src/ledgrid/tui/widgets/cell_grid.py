"""Grid widget containing the 8x13 cell widgets."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message

from ledgrid.models import AppConfig, LedGrid

from .cell_widget import CellWidget


class CellGrid(Container):
    """
    8x13 grid of cell widgets (layout container).

    Row 0 is drawn at the top, column 0 at the left, matching the order
    cells are packed into words.

    This widget is stateless - it doesn't store the grid model.
    Cell states are passed in explicitly when they change.
    """

    DEFAULT_CSS = """
    CellGrid {
        layout: grid;
        grid-size: 13 8;
        grid-gutter: 0;
        padding: 1;
        height: 1fr;
    }
    """

    class CellClicked(Message):
        """Message posted when any cell is clicked."""

        def __init__(self, row: int, col: int):
            super().__init__()
            self.row = row
            self.col = col

    def __init__(self) -> None:
        super().__init__()
        # Map linear index to widget
        self.cell_widgets: dict[int, CellWidget] = {}
        self._initialized = False

    def compose(self) -> ComposeResult:
        # Populated via initialize_cells() once grid data is available
        return []

    def initialize_cells(self, grid: LedGrid, config: AppConfig) -> None:
        """
        Create a widget for every cell.

        Args:
            grid: Grid whose current states are shown
            config: Provides the lit/unlit colors
        """
        if self._initialized:
            for widget in self.cell_widgets.values():
                widget.remove()
            self.cell_widgets.clear()

        for row in range(grid.ROWS):
            for col in range(grid.COLS):
                index = grid.index_of(row, col)
                widget = CellWidget(
                    row,
                    col,
                    grid.cells[index],
                    lit_color=config.lit_color,
                    unlit_color=config.unlit_color,
                    show_index=config.show_indices,
                )
                self.cell_widgets[index] = widget
                self.mount(widget)

        self._initialized = True

    def update_cell(self, index: int, lit: bool) -> None:
        """
        Update one cell's display.

        Args:
            index: Linear index of the cell (0-103)
            lit: New state
        """
        if index in self.cell_widgets:
            self.cell_widgets[index].set_lit(lit)

    def on_cell_widget_clicked(self, message: CellWidget.Clicked) -> None:
        """Forward clicks from child widgets to the app."""
        message.stop()
        self.post_message(self.CellClicked(message.row, message.col))
