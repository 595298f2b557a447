"""Decorators for TUI components."""

from functools import wraps

from ledgrid.exceptions import handle_errors


def handle_action_errors(operation_name: str):
    """
    Run a TUI handler so that errors become notifications instead of crashes.

    Example:
        @handle_action_errors("toggle cell")
        def on_cell_grid_cell_clicked(self, message):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            def notify(msg: str) -> None:
                self.notify(msg, severity="error", timeout=5)

            return handle_errors(operation_name, notify)(func)(self, *args, **kwargs)
        return wrapper
    return decorator
