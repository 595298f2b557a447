"""Data models for the LED grid."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .grid import CELL_COUNT, COLS, ROWS, LedGrid

__all__ = [
    "AppConfig",
    "CELL_COUNT",
    "COLS",
    "Color",
    "DEFAULT_CONFIG_PATH",
    "LedGrid",
    "ROWS",
]
