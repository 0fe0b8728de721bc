"""Tests for the validation module."""

from __future__ import annotations

from pathlib import Path

import pytest

from filekit.validation import (
    BYTES_PER_MEGABYTE,
    ValidationResult,
    check_mime_type,
    check_size,
    validate_file,
)


class TestValidationResult:
    """Tests for ValidationResult class."""

    def test_success_when_no_errors(self) -> None:
        """Result is successful when errors list is empty."""
        result = ValidationResult()
        assert result.success is True
        assert result.errors == []

    def test_failure_when_errors_present(self) -> None:
        """Result is failure when errors list has items."""
        result = ValidationResult(errors=["too big"])
        assert result.success is False
        assert result.errors == ["too big"]


class TestCheckSize:
    """Tests for check_size function."""

    def test_within_limit(self) -> None:
        """5,000,000 bytes fit in 5 MiB."""
        assert check_size(5_000_000, 5) is True

    def test_over_limit(self) -> None:
        """6,000,000 bytes exceed 5 MiB."""
        assert check_size(6_000_000, 5) is False

    def test_limit_inclusive(self) -> None:
        """Exactly the limit is allowed."""
        assert check_size(5 * BYTES_PER_MEGABYTE, 5) is True
        assert check_size(5 * BYTES_PER_MEGABYTE + 1, 5) is False

    def test_float_size(self) -> None:
        """Float byte counts are sizes, not paths."""
        assert check_size(5e6, 5) is True
        assert check_size(6e6, 5) is False

    def test_zero(self) -> None:
        """Empty files pass a zero limit."""
        assert check_size(0, 0) is True

    def test_path(self, tmp_path: Path) -> None:
        """A path is measured on disk."""
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\0" * 2048)

        assert check_size(path, 1) is True
        assert check_size(str(path), 0.001) is False

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            check_size(tmp_path / "missing.bin", 1)


class TestCheckMimeType:
    """Tests for check_mime_type function."""

    def test_allowed(self, png_file: Path) -> None:
        """Sniffed type in the allow-list passes."""
        assert check_mime_type(png_file, ["image/png", "image/jpeg"]) is True

    def test_not_allowed(self, text_file: Path) -> None:
        """The extension does not matter, only content."""
        assert check_mime_type(text_file, {"image/png"}) is False

    def test_empty_allow_list(self, png_file: Path) -> None:
        """Nothing passes an empty allow-list."""
        assert check_mime_type(png_file, []) is False


class TestValidateFile:
    """Tests for validate_file function."""

    def test_no_checks(self, text_file: Path) -> None:
        """With no limits an existing file passes."""
        assert validate_file(text_file).success is True

    def test_all_pass(self, png_file: Path) -> None:
        """Size and type within limits."""
        result = validate_file(png_file, max_megabytes=1, allowed_types=["image/png"])
        assert result.success is True

    def test_collects_every_failure(self, text_file: Path) -> None:
        """Each failing check adds a message."""
        result = validate_file(text_file, max_megabytes=0, allowed_types=["image/png"])

        assert result.success is False
        assert len(result.errors) == 2
        assert "exceeds 0 MB" in result.errors[0]
        assert "text/plain not allowed" in result.errors[1]

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is reported, not raised."""
        result = validate_file(tmp_path / "missing.bin", max_megabytes=1)

        assert result.success is False
        assert result.errors[0].startswith("File not found")
