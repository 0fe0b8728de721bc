"""Local filesystem operations.

LocalFileSystem wraps the standard library os, pathlib and shutil
calls with the existence checks and boolean outcomes callers rely on:
operations that find their work already done return False instead of
raising.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterator, Sequence
from pathlib import Path

from filekit.config import FileKitSettings
from filekit.errors import DirectoryCreationError
from filekit.paths import repair_path
from filekit.types import DirectoryEntry

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def _mtime(path: Path) -> float:
    """Modification time of a path, 0 when it doesn't exist."""
    try:
        return path.stat().st_mtime
    except FileNotFoundError:
        return 0


class LocalFileSystem:
    """Filesystem implementation backed by the host OS.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, settings: FileKitSettings | None = None) -> None:
        """Initialize the filesystem.

        Args:
            settings: Defaults for permissions and hidden entries.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.settings = settings or FileKitSettings()

    @classmethod
    def create(cls, settings: FileKitSettings) -> LocalFileSystem:
        """Create a filesystem with explicit settings."""
        return cls(settings=settings)

    @classmethod
    def create_default(cls) -> LocalFileSystem:
        """Create a filesystem with default settings."""
        return cls()

    def exists(self, path: PathLike) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def mkdir(
        self, paths: PathLike | Sequence[PathLike], permission: int | None = None
    ) -> bool | dict[str, bool]:
        """Create a directory, or several, including missing parents.

        Args:
            paths: A single path, or a list/tuple of paths.
            permission: Mode bits for the new directory. Defaults to
                the configured default permission.

        Returns:
            For a single path, True if it was created and False if it
            already existed. For a list, a mapping of each repaired path
            to its own result.

        Raises:
            DirectoryCreationError: If creation fails.
        """
        if isinstance(paths, (list, tuple)):
            return {
                repaired: self._mkdir_one(repaired, permission)
                for repaired in (repair_path(path) for path in paths)
            }

        return self._mkdir_one(repair_path(paths), permission)

    def _mkdir_one(self, path: str, permission: int | None) -> bool:
        if os.path.exists(path):
            logger.debug("Directory already exists: %s", path)
            return False

        mode = self.settings.default_permission if permission is None else permission
        try:
            self._make_parents(Path(path), mode)
        except OSError as e:
            raise self._creation_error(path, e) from e

        logger.debug("Created directory %s (mode %o)", path, mode)
        return True

    @staticmethod
    def _make_parents(path: Path, mode: int) -> None:
        """Create path and every missing ancestor, each with mode."""
        missing = []
        current = path
        while not os.path.lexists(current):
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for directory in reversed(missing):
            try:
                os.mkdir(directory, mode)
            except FileExistsError:
                # ".." segments resolve to directories created earlier
                if not os.path.isdir(directory):
                    raise

    @staticmethod
    def _creation_error(path: str, error: OSError) -> DirectoryCreationError:
        reason = error.strerror or str(error)
        try:
            resolved = Path(path).resolve()
        except (OSError, RuntimeError):
            root = Path(os.path.abspath(os.sep))
            return DirectoryCreationError(
                f"Failed to create directory {path}: {reason} ({root})", path=None, root=root
            )
        return DirectoryCreationError(
            f"Failed to create directory {resolved}: {reason}", path=resolved
        )

    def unlink(self, path: PathLike) -> bool:
        """Remove a file.

        Returns:
            True if the file was removed, False if it did not exist.
        """
        if not os.path.exists(path):
            return False

        os.unlink(path)
        logger.debug("Removed %s", path)
        return True

    def touch(self, path: PathLike, content: str | None = None) -> bool:
        """Create a file with optional content.

        Args:
            path: File to create.
            content: Text to write. The file is left empty when None.

        Returns:
            True if the file was created, False if it already existed or
            could not be written.
        """
        if os.path.exists(path):
            return False

        try:
            Path(path).write_text(content or "")
        except OSError as e:
            logger.debug("Could not create %s: %s", path, e)
            return False

        return True

    def is_stale(self, source: PathLike, destination: PathLike) -> bool:
        """Check whether destination needs refreshing from source.

        Missing paths count as modified at time 0, so an absent
        destination is always stale. Content is not compared.
        """
        destination = Path(destination)
        if not destination.exists():
            return True
        return _mtime(Path(source)) > _mtime(destination)

    def copy(self, source: PathLike, destination: PathLike) -> bool:
        """Copy a file when the destination is missing or older.

        Only content is copied; the destination gets default permissions.

        Returns:
            True if the file was copied. False if the destination is at
            least as new as the source, is a directory, or the source
            doesn't exist.
        """
        if not self.is_stale(source, destination):
            logger.debug("Skipping copy, %s is up to date", destination)
            return False

        if not os.path.exists(source):
            logger.warning("Copy source does not exist: %s", source)
            return False

        if os.path.isdir(destination):
            logger.warning("Copy destination is a directory: %s", destination)
            return False

        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)
        return True

    def walk_tree(self, directory: PathLike) -> Iterator[DirectoryEntry]:
        """Walk a directory tree, yielding each directory before its contents.

        Entries are visited in name order. Hidden entries are included.
        A symlink to a directory is reported as a directory but not
        descended into.
        """
        root = Path(directory)

        def _walk(current: Path, prefix: str) -> Iterator[DirectoryEntry]:
            for name in sorted(os.listdir(current)):
                child = current / name
                relative = f"{prefix}{name}"
                if child.is_dir():
                    yield DirectoryEntry(relative_path=relative, is_dir=True)
                    if not child.is_symlink():
                        yield from _walk(child, f"{relative}/")
                else:
                    yield DirectoryEntry(relative_path=relative, is_dir=False)

        yield from _walk(root, "")

    def copy_directory(
        self, source: PathLike, destination: PathLike, permission: int | None = None
    ) -> None:
        """Mirror a directory tree into an existing destination directory.

        Nothing happens unless both source and destination are existing
        directories. Subdirectories are created as needed and every file
        is copied, overwriting what is already there. A failure part way
        leaves the files copied so far in place.

        Args:
            source: Directory to copy from.
            destination: Directory to copy into.
            permission: Mode bits for created subdirectories.

        Raises:
            DirectoryCreationError: If a subdirectory cannot be created.
        """
        if not (os.path.isdir(source) and os.path.isdir(destination)):
            logger.debug("Skipping directory copy %s -> %s", source, destination)
            return

        source_root = Path(source)
        destination_root = Path(destination)
        for entry in self.walk_tree(source_root):
            target = destination_root / entry.relative_path
            if entry.is_dir:
                self.mkdir(target, permission)
            else:
                shutil.copyfile(source_root / entry.relative_path, target)

        logger.debug("Copied directory %s -> %s", source, destination)

    def scan_dir(self, directory: PathLike) -> list[str]:
        """List files under a directory, recursively.

        Hidden entries are skipped, along with everything below a hidden
        directory. Directories are not listed themselves; their files
        appear prefixed with the directory name.

        Args:
            directory: Directory to scan.

        Returns:
            Relative file paths joined with ``/``, in name order.
        """
        hidden_prefix = self.settings.hidden_prefix
        result: list[str] = []

        for name in sorted(os.listdir(directory)):
            if name.startswith(hidden_prefix):
                continue

            child = os.path.join(directory, name)
            if os.path.isdir(child):
                result.extend(f"{name}/{nested}" for nested in self.scan_dir(child))
            else:
                result.append(name)

        return result
