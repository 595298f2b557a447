"""
Turning exceptions into something a person can act on.

- `handle_errors` keeps a TUI action from taking the app down: the failure is
  logged and passed to a notify callback instead.
- `wrap_pydantic_error` maps a config file's `ValidationError` onto
  `ConfigFileInvalidError` (bad JSON) or `ConfigValidationError` (bad values).
- `format_error_for_display` splits any exception into the message and hint
  the CLI error banner prints.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional

from pydantic import ValidationError

from .base import LedGridError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def handle_errors(operation_name: str, notify: Callable[[str], None]) -> Callable:
    """
    Decorator that logs a failure, reports it through ``notify`` and returns None.

    ledgrid errors are logged with their technical message and shown with
    their recovery hint. Anything else is logged with a traceback.
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except LedGridError as e:
                logger.error(f"Failed to {operation_name}: {e.technical_message}")
                notify(e.get_full_message())
            except Exception as e:
                logger.exception(f"Unexpected error during {operation_name}")
                notify(f"Error: {e}")
            return None

        return wrapper
    return decorator


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "config"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> LedGridError:
    """Convert a config file's ValidationError into a ledgrid configuration error."""
    details = error.errors()

    for detail in details:
        if detail["type"] == "json_invalid":
            reason = detail.get("ctx", {}).get("error", detail["msg"])
            return ConfigFileInvalidError(file_path, str(reason))

    if len(details) == 1:
        detail = details[0]
        return ConfigValidationError(
            field=_field_name(detail["loc"]),
            value=detail.get("input"),
            error_msg=detail["msg"],
            file_path=file_path,
        )

    lines = [f"  - {_field_name(d['loc'])}: {d['msg']}" for d in details]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for the CLI error banner."""
    if isinstance(error, LedGridError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
