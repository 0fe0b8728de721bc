"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from filekit.config import FileKitSettings
from filekit.filesystem import LocalFileSystem

# Smallest valid PNG: signature plus IHDR, IDAT and IEND chunks.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


@pytest.fixture
def fs() -> LocalFileSystem:
    """Create a filesystem with default settings."""
    return LocalFileSystem(settings=FileKitSettings())


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small source tree with nested, empty and hidden entries."""
    root = tmp_path / "source"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / ".git").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / ".hidden").write_text("secret")
    (root / "sub" / "b.txt").write_text("beta")
    (root / "sub" / "deeper" / "c.txt").write_text("gamma")
    (root / ".git" / "config").write_text("[core]")
    return root


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """Write a PNG image under a misleading extension."""
    path = tmp_path / "image.txt"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Write a plain text file."""
    path = tmp_path / "notes.png"
    path.write_text("just some plain words\n")
    return path
