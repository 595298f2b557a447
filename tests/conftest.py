"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from ledgrid.models import AppConfig, LedGrid
from ledgrid.services import GridService


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file inside the temp directory."""
    return temp_dir / "ledgrid" / "config.json"


@pytest.fixture
def empty_grid():
    """Create an all-off grid."""
    return LedGrid()


@pytest.fixture
def full_grid():
    """Create an all-on grid."""
    grid = LedGrid()
    grid.fill()
    return grid


@pytest.fixture
def config():
    """Default configuration (never touches the home directory)."""
    return AppConfig()


@pytest.fixture
def grid_service():
    """Grid service over a fresh grid."""
    return GridService()


class RecordingObserver:
    """Grid observer that records every event it receives."""

    def __init__(self):
        self.events = []

    def on_grid_event(self, event, cell_indices, grid, **kwargs):
        self.events.append((event, list(cell_indices), kwargs))


@pytest.fixture
def recording_observer():
    """Observer that records grid events."""
    return RecordingObserver()
