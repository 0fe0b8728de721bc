"""Protocol definitions for filesystem access.

Code that needs filesystem operations can depend on the FileSystem
protocol instead of LocalFileSystem, so test doubles can be injected
without inheritance. LocalFileSystem satisfies it structurally.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filekit.types import DirectoryEntry


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations."""

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def mkdir(
        self,
        paths: str | os.PathLike[str] | Sequence[str | os.PathLike[str]],
        permission: int | None = None,
    ) -> bool | dict[str, bool]:
        """Create one or more directories.

        Args:
            paths: Path, or list of paths, to create.
            permission: Mode bits for new directories.

        Returns:
            False if a single path already existed, True if it was created;
            a per-path mapping of those results for a list.
        """
        ...

    def unlink(self, path: str | os.PathLike[str]) -> bool:
        """Remove a file.

        Args:
            path: Path to remove.

        Returns:
            True if removed, False if not found.
        """
        ...

    def touch(self, path: str | os.PathLike[str], content: str | None = None) -> bool:
        """Create a file.

        Args:
            path: Path to create.
            content: Optional initial content.

        Returns:
            True if created, False if it existed or writing failed.
        """
        ...

    def copy(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> bool:
        """Copy a file if the destination is missing or older.

        Args:
            source: File to copy.
            destination: Target path.

        Returns:
            True if the file was copied.
        """
        ...

    def walk_tree(self, directory: str | os.PathLike[str]) -> Iterator[DirectoryEntry]:
        """Walk a directory tree parent-first.

        Args:
            directory: Root of the walk.

        Returns:
            Iterator of entries relative to the root.
        """
        ...

    def copy_directory(
        self,
        source: str | os.PathLike[str],
        destination: str | os.PathLike[str],
        permission: int | None = None,
    ) -> None:
        """Mirror a directory tree into an existing directory.

        Args:
            source: Directory to copy from.
            destination: Existing directory to copy into.
            permission: Mode bits for created subdirectories.
        """
        ...

    def scan_dir(self, directory: str | os.PathLike[str]) -> list[str]:
        """List non-hidden files under a directory recursively.

        Args:
            directory: Directory to scan.

        Returns:
            Relative file paths.
        """
        ...
