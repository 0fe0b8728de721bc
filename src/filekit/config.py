"""Settings for filesystem operations."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PERMISSION = 0o755
HIDDEN_PREFIX = "."


class FileKitSettings(BaseModel):
    """Defaults applied by LocalFileSystem.

    Attributes:
        default_permission: Mode bits for newly created directories.
        hidden_prefix: Entries whose name starts with this are skipped by scans.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    default_permission: int = Field(default=DEFAULT_PERMISSION, alias="defaultPermission")
    hidden_prefix: str = Field(default=HIDDEN_PREFIX, alias="hiddenPrefix")

    @field_validator("default_permission")
    @classmethod
    def _check_permission(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"permission out of range: {oct(value)}")
        return value

    @field_validator("hidden_prefix")
    @classmethod
    def _check_hidden_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("hidden_prefix cannot be empty")
        return value

    @classmethod
    def from_file(cls, path: Path) -> FileKitSettings:
        """Load settings from a JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed FileKitSettings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            pydantic.ValidationError: If a value is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        data = json.loads(path.read_text())
        return cls.model_validate(data)
