"""JSON persistence for pydantic models.

Only the application config is stored this way; grid state never touches
disk. Saving keeps a ``.bak`` copy of the previous file and writes through a
temp file, and a file that fails to load is never replaced with defaults.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ledgrid.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """Stateless load/save helpers used by AppConfig."""

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Read and validate ``model_type`` from ``path``.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If the values fail validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` as indented JSON.

        Parent directories are created. With ``backup``, an existing file is
        first copied to ``<name>.bak``.
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            backup_path = path.with_suffix(path.suffix + ".bak")
            shutil.copy2(path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Failed to save {type(data).__name__} to {path}: {e}")
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Failed to save {type(data).__name__}: {e}",
                recovery_hint="Check file permissions and disk space. A .bak copy may be available.",
            ) from e
        finally:
            if temp_path.exists():
                temp_path.unlink()

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def ensure_valid_or_create(path: Path, model_type: type[T]) -> T:
        """
        Load ``path``, or write and return a default ``model_type()`` if it is missing.

        A file that exists but fails to load raises; it is never overwritten.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, creating default {model_type.__name__}")

        instance = model_type()
        PydanticPersistence.save_json(instance, path, backup=False)
        return instance
