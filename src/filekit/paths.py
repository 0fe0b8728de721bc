"""Path string helpers."""

from __future__ import annotations

import os

_DOUBLE_SEP = os.sep + os.sep


def repair_path(path: str | os.PathLike[str]) -> str:
    """Normalize separators in a path.

    Both ``/`` and ``\\`` become ``os.sep`` and runs of separators are
    collapsed to a single one.

    Example:
        >>> repair_path("a//b\\\\c") == os.sep.join(["a", "b", "c"])
        True
    """
    repaired = os.fspath(path).replace("/", os.sep).replace("\\", os.sep)
    while _DOUBLE_SEP in repaired:
        repaired = repaired.replace(_DOUBLE_SEP, os.sep)
    return repaired


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the extension of the last path component, without the dot.

    A name with no dot, or ending in a dot, has an empty extension.
    """
    name = os.fspath(path).replace("\\", "/").rsplit("/", 1)[-1]
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""
