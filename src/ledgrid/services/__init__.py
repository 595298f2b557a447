"""Application services."""

from .grid_service import EncodedGrid, GridService

__all__ = ["EncodedGrid", "GridService"]
