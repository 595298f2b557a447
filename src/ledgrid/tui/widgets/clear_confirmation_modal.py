"""Modal dialog for confirming a full grid clear."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label


class ClearConfirmationModal(ModalScreen[bool]):
    """Modal dialog asking user to confirm turning every LED off."""

    DEFAULT_CSS = """
    ClearConfirmationModal {
        align: center middle;
    }

    #dialog {
        width: 50;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #question {
        width: 100%;
        content-align: center middle;
        padding: 1 0;
        text-style: bold;
    }

    #button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    #button-container Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    def __init__(self, lit_count: int) -> None:
        """
        Initialize the modal.

        Args:
            lit_count: Number of cells that will be turned off
        """
        super().__init__()
        self.lit_count = lit_count

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(f"Turn off all {self.lit_count} lit LEDs?", id="question")
            with Horizontal(id="button-container"):
                yield Button("Clear", variant="error", id="clear-btn")
                yield Button("Cancel", variant="default", id="cancel-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "clear-btn":
            event.stop()
            self.dismiss(True)
        elif event.button.id == "cancel-btn":
            event.stop()
            self.dismiss(False)
