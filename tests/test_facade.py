"""Tests for the File and Validation namespaces."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from filekit import File, Validation
from filekit.config import FileKitSettings


@pytest.fixture
def restore_filesystem() -> Iterator[None]:
    """Put the shared filesystem back after a test reconfigures it."""
    original = File.filesystem()
    yield
    File.configure(original.settings)


class TestFile:
    """Tests for File static methods."""

    def test_round_trip_operations(self, tmp_path: Path) -> None:
        """Static methods reach the shared filesystem."""
        target = tmp_path / "dir"

        assert File.mkdir(target) is True
        assert File.touch(target / "a.txt", "hi") is True
        assert File.scan_dir(target) == ["a.txt"]
        assert File.copy(target / "a.txt", target / "b.txt") is True
        assert File.unlink(target / "a.txt") is True
        assert File.unlink(target / "a.txt") is False

    def test_copy_directory(self, tmp_path: Path) -> None:
        """copy_directory mirrors into an existing directory."""
        source = tmp_path / "src"
        (source / "nested").mkdir(parents=True)
        (source / "nested" / "f.txt").write_text("f")
        destination = tmp_path / "dst"
        destination.mkdir()

        File.copy_directory(source, destination)

        assert (destination / "nested" / "f.txt").read_text() == "f"

    def test_pure_helpers(self) -> None:
        """Path and content type helpers."""
        assert File.repair_path("a//b") == File.repair_path("a/b")
        assert File.get_extension("x/y.png") == "png"
        assert File.get_content_type("png") == "image/png"
        assert File.get_content_type("unknownext") is False

    def test_get_mime_type(self, png_file: Path) -> None:
        """MIME sniffing is exposed."""
        assert File.get_mime_type(png_file) == "image/png"

    @pytest.mark.usefixtures("restore_filesystem")
    def test_configure(self, tmp_path: Path) -> None:
        """configure swaps the shared filesystem settings."""
        File.configure(FileKitSettings(hidden_prefix="_"))
        (tmp_path / "_skip").touch()
        (tmp_path / ".keep").touch()

        assert File.filesystem().settings.hidden_prefix == "_"
        assert File.scan_dir(tmp_path) == [".keep"]


class TestValidation:
    """Tests for Validation static methods."""

    def test_size(self) -> None:
        """Size limits in MiB."""
        assert Validation.size(5_000_000, 5) is True
        assert Validation.size(6_000_000, 5) is False

    def test_mime_type(self, png_file: Path) -> None:
        """Allow-list membership of the sniffed type."""
        assert Validation.mime_type(png_file, ["image/png"]) is True
        assert Validation.mime_type(png_file, ["text/plain"]) is False
