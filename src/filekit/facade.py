"""Static-method namespaces over the default filesystem.

``File`` and ``Validation`` mirror the flat call style used by
application code, e.g. ``File.mkdir("cache")`` or
``Validation.size(upload, 5)``.
"""

from __future__ import annotations

import os
from collections.abc import Collection, Sequence
from typing import Literal

from filekit import content_types, mime, paths, validation
from filekit.config import FileKitSettings
from filekit.filesystem import LocalFileSystem

_filesystem = LocalFileSystem.create_default()


class File:
    """Filesystem helpers backed by a shared LocalFileSystem."""

    @staticmethod
    def configure(settings: FileKitSettings) -> None:
        """Replace the shared filesystem with one using new settings."""
        global _filesystem
        _filesystem = LocalFileSystem.create(settings)

    @staticmethod
    def filesystem() -> LocalFileSystem:
        """Return the shared filesystem."""
        return _filesystem

    @staticmethod
    def repair_path(path: str | os.PathLike[str]) -> str:
        return paths.repair_path(path)

    @staticmethod
    def mkdir(
        path: str | os.PathLike[str] | Sequence[str | os.PathLike[str]],
        permission: int | None = None,
    ) -> bool | dict[str, bool]:
        return _filesystem.mkdir(path, permission)

    @staticmethod
    def unlink(path: str | os.PathLike[str]) -> bool:
        return _filesystem.unlink(path)

    @staticmethod
    def scan_dir(directory: str | os.PathLike[str]) -> list[str]:
        return _filesystem.scan_dir(directory)

    @staticmethod
    def touch(path: str | os.PathLike[str], content: str | None = None) -> bool:
        return _filesystem.touch(path, content)

    @staticmethod
    def copy(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> bool:
        return _filesystem.copy(source, destination)

    @staticmethod
    def copy_directory(
        source: str | os.PathLike[str],
        destination: str | os.PathLike[str],
        permission: int | None = None,
    ) -> None:
        _filesystem.copy_directory(source, destination, permission)

    @staticmethod
    def get_extension(path: str | os.PathLike[str]) -> str:
        return paths.get_extension(path)

    @staticmethod
    def get_content_type(extension: str) -> str | Literal[False]:
        return content_types.get_content_type(extension)

    @staticmethod
    def get_mime_type(path: str | os.PathLike[str]) -> str:
        return mime.get_mime_type(path)


class Validation:
    """File validation checks."""

    @staticmethod
    def size(size_or_path: int | float | str | os.PathLike[str], max_megabytes: int | float) -> bool:
        return validation.check_size(size_or_path, max_megabytes)

    @staticmethod
    def mime_type(path: str | os.PathLike[str], allowed_types: Collection[str]) -> bool:
        return validation.check_mime_type(path, allowed_types)
