"""Filesystem convenience helpers and file validation checks."""

__version__ = "0.1.0"

from filekit.config import FileKitSettings
from filekit.content_types import get_content_type
from filekit.errors import DirectoryCreationError, FileKitError
from filekit.facade import File, Validation
from filekit.filesystem import LocalFileSystem
from filekit.mime import get_mime_type
from filekit.paths import get_extension, repair_path
from filekit.protocols import FileSystem
from filekit.types import DirectoryEntry
from filekit.validation import ValidationResult, check_mime_type, check_size, validate_file

__all__ = [
    "__version__",
    "DirectoryCreationError",
    "DirectoryEntry",
    "File",
    "FileKitError",
    "FileKitSettings",
    "FileSystem",
    "LocalFileSystem",
    "Validation",
    "ValidationResult",
    "check_mime_type",
    "check_size",
    "get_content_type",
    "get_extension",
    "get_mime_type",
    "repair_path",
    "validate_file",
]
