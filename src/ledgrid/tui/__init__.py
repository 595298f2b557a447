"""Terminal UI for the LED grid."""

from .app import LedGridApp

__all__ = ["LedGridApp"]
