"""Status bar widget showing lit cell count and result freshness."""

from textual.widgets import Static


class StatusBar(Static):
    """
    Status bar displaying current grid state.

    Shows:
    - Number of lit cells
    - Whether the displayed words still match the grid
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.stale {
        background: $warning 40%;
    }
    """

    def __init__(self, total: int = 104) -> None:
        super().__init__()
        self._lit = 0
        self._total = total
        self._computed = False
        self._stale = False
        self._update_display()

    def update_state(self, lit: int, computed: bool, stale: bool) -> None:
        """
        Update all status information.

        Args:
            lit: Number of lit cells
            computed: Whether words have been computed at least once
            stale: Whether the grid changed since the last computation
        """
        self._lit = lit
        self._computed = computed
        self._stale = stale
        self._update_display()

    @property
    def stale(self) -> bool:
        return self._stale

    def _update_display(self) -> None:
        lit_text = f"💡 {self._lit}/{self._total} lit"

        if not self._computed:
            words_text = "no words yet"
        elif self._stale:
            words_text = "words out of date - press Enter"
        else:
            words_text = "words up to date"

        self.set_class(self._stale, "stale")
        self.update(" | ".join([lit_text, words_text]))
