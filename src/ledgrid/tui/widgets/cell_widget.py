"""Widget representing a single LED cell in the grid."""

from textual.message import Message
from textual.widgets import Static

from ledgrid.models import COLS, Color


class CellWidget(Static):
    """
    Widget representing a single LED (presentation only).

    Paints itself with the lit or unlit color and posts a message when
    clicked, leaving the toggle itself to the app.
    """

    DEFAULT_CSS = """
    CellWidget {
        width: 100%;
        height: 100%;
        border: solid $surface-lighten-2;
        content-align: center middle;
    }

    CellWidget.lit {
        border: solid $primary-lighten-2;
        text-style: bold;
    }
    """

    class Clicked(Message):
        """Message posted when the cell is clicked."""

        def __init__(self, row: int, col: int):
            super().__init__()
            self.row = row
            self.col = col

    def __init__(
        self,
        row: int,
        col: int,
        lit: bool,
        lit_color: Color,
        unlit_color: Color,
        show_index: bool = False,
    ) -> None:
        """
        Initialize cell widget.

        Args:
            row: Row of this cell (0-7)
            col: Column of this cell (0-12)
            lit: Initial state
            lit_color: Background when on
            unlit_color: Background when off
            show_index: Label the cell with its linear index
        """
        super().__init__(id=f"cell-{row}-{col}")
        self.row = row
        self.col = col
        self._lit = lit
        self._lit_color = lit_color
        self._unlit_color = unlit_color
        self._show_index = show_index
        self.update_display()

    @property
    def lit(self) -> bool:
        return self._lit

    def set_lit(self, lit: bool) -> None:
        """Update the displayed state."""
        if lit != self._lit:
            self._lit = lit
            self.update_display()

    def update_display(self) -> None:
        """Render current cell state."""
        color = self._lit_color if self._lit else self._unlit_color
        self.styles.background = color.to_hex()
        self.set_class(self._lit, "lit")

        if self._show_index:
            self.update(str(self.row * COLS + self.col))
        else:
            self.update("")

    def on_click(self) -> None:
        """Handle click event - post message for parent to handle."""
        self.post_message(self.Clicked(self.row, self.col))
