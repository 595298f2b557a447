"""ledgrid: compose LED matrix patterns and encode them as 32-bit hex words."""

__version__ = "0.1.0"

from .encoding import decode, encode, format_initializer
from .models import LedGrid
from .services import GridService

__all__ = [
    "GridService",
    "LedGrid",
    "decode",
    "encode",
    "format_initializer",
]
