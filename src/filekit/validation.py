"""Validation checks for uploaded or user-supplied files."""

from __future__ import annotations

import os
from collections.abc import Collection

from filekit.mime import get_mime_type

BYTES_PER_MEGABYTE = 1024 * 1024


class ValidationResult:
    """Result of validating a file."""

    __slots__ = ("errors", "success")

    def __init__(self, errors: list[str] | None = None) -> None:
        """Initialize validation result.

        Args:
            errors: List of validation failures.
        """
        self.errors = errors or []
        self.success = len(self.errors) == 0


def check_size(size_or_path: int | float | str | os.PathLike[str], max_megabytes: int | float) -> bool:
    """Check that a size does not exceed a limit in megabytes.

    Args:
        size_or_path: Size in bytes, or a path whose size is read.
        max_megabytes: Largest allowed size, in MiB (inclusive).

    Returns:
        True if the size is within the limit.

    Example:
        >>> check_size(5_000_000, 5)
        True
        >>> check_size(6_000_000, 5)
        False
    """
    if isinstance(size_or_path, (int, float)):
        size = size_or_path
    else:
        size = os.path.getsize(size_or_path)

    return size <= max_megabytes * BYTES_PER_MEGABYTE


def check_mime_type(path: str | os.PathLike[str], allowed_types: Collection[str]) -> bool:
    """Check that a file's content type is in the allowed set."""
    return get_mime_type(path) in allowed_types


def validate_file(
    path: str | os.PathLike[str],
    max_megabytes: int | float | None = None,
    allowed_types: Collection[str] | None = None,
) -> ValidationResult:
    """Run the requested checks on a file and collect failures.

    Checks whose limit is None are skipped.

    Args:
        path: File to validate.
        max_megabytes: Largest allowed size in MiB.
        allowed_types: Accepted MIME types.

    Returns:
        ValidationResult listing every failed check.
    """
    if not os.path.isfile(path):
        return ValidationResult(errors=[f"File not found: {path}"])

    errors = []
    if max_megabytes is not None and not check_size(path, max_megabytes):
        errors.append(f"File exceeds {max_megabytes} MB: {path}")
    if allowed_types is not None:
        mime_type = get_mime_type(path)
        if mime_type not in allowed_types:
            errors.append(f"File type {mime_type} not allowed: {path}")

    return ValidationResult(errors=errors)
