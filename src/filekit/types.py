"""Shared data types for filekit."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DirectoryEntry"]


@dataclass(frozen=True)
class DirectoryEntry:
    """An entry met while walking a directory tree.

    Attributes:
        relative_path: Path relative to the walk root, joined with ``/``.
        is_dir: True for directories, False for everything else.
    """

    relative_path: str
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.relative_path:
            raise ValueError("relative_path cannot be empty")

    @property
    def name(self) -> str:
        """Final component of the relative path."""
        return self.relative_path.rsplit("/", 1)[-1]

    @property
    def depth(self) -> int:
        """Nesting level below the walk root (0 for direct children)."""
        return self.relative_path.count("/")
