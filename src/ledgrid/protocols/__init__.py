"""Event and observer protocols."""

from .events import GridEvent
from .observers import GridObserver

__all__ = ["GridEvent", "GridObserver"]
