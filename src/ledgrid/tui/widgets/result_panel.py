"""Panel showing the encoded words."""

from textual.widgets import Static

PLACEHOLDER = "Press the button to show the words"


class ResultPanel(Static):
    """Displays the initializer text from the last computation.

    The text is only replaced when the user asks for it; toggling cells
    leaves the previous result in place.
    """

    DEFAULT_CSS = """
    ResultPanel {
        height: auto;
        min-height: 6;
        padding: 1 2;
        border: round $primary;
        text-style: bold;
    }

    ResultPanel.empty {
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self) -> None:
        super().__init__(PLACEHOLDER, markup=False)
        self.result_text = ""
        self.add_class("empty")

    def show_result(self, text: str) -> None:
        """Replace the displayed words."""
        self.result_text = text
        self.remove_class("empty")
        self.update(text)
