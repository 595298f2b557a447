"""Domain events for observer pattern."""

from enum import Enum


class GridEvent(Enum):
    """Events fired by the grid service."""

    CELL_TOGGLED = "cell_toggled"    # A single cell was flipped or set
    GRID_CLEARED = "grid_cleared"    # Every cell turned off
    GRID_FILLED = "grid_filled"      # Every cell turned on
    GRID_INVERTED = "grid_inverted"  # Every cell flipped
    ENCODED = "encoded"              # Words were computed on request
