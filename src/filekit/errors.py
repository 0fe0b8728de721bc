"""Exception types raised by filekit."""

from __future__ import annotations

from pathlib import Path


class FileKitError(Exception):
    """Base error for filekit operations."""

    pass


class DirectoryCreationError(FileKitError):
    """A directory could not be created.

    Attributes:
        path: Absolute path of the directory that failed.
        root: Filesystem root, set only when the failing path itself
            could not be resolved.
    """

    def __init__(self, message: str, path: Path | None = None, root: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.root = root
