"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from ledgrid.utils.persistence import PydanticPersistence

from .color import LED_BLUE, LED_GREY, Color

DEFAULT_CONFIG_PATH = Path.home() / ".ledgrid" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    lit_color: Color = Field(default=LED_BLUE, description="Color of cells that are on")
    unlit_color: Color = Field(default=LED_GREY, description="Color of cells that are off")
    show_indices: bool = Field(
        default=False, description="Label each cell with its linear index (row * 13 + col)"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file, writing defaults if the file is missing.

        Args:
            path: Path to config file. If None, uses ~/.ledgrid/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.ensure_valid_or_create(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
