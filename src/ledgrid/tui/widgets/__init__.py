"""Reusable UI widgets for the TUI."""

from .cell_grid import CellGrid
from .cell_widget import CellWidget
from .clear_confirmation_modal import ClearConfirmationModal
from .result_panel import ResultPanel
from .status_bar import StatusBar

__all__ = [
    "CellGrid",
    "CellWidget",
    "ClearConfirmationModal",
    "ResultPanel",
    "StatusBar",
]
