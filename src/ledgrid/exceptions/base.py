"""Root of the ledgrid error hierarchy."""

from typing import Optional


class LedGridError(Exception):
    """
    Base for every error ledgrid raises on purpose.

    The CLI banner and TUI notifications show ``user_message``; the log gets
    ``technical_message``. ``recovery_hint`` is appended as a suggestion when
    set, and ``recoverable`` tells the UI it can keep running.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
