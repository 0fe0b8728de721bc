"""Content-based MIME type detection."""

from __future__ import annotations

import logging
import os

import magic

logger = logging.getLogger(__name__)


def get_mime_type(path: str | os.PathLike[str]) -> str:
    """Detect the MIME type of a file from its content.

    The file extension is ignored, so a misnamed file reports what it
    really contains.

    Args:
        path: File to inspect.

    Returns:
        MIME type string such as ``"image/png"``.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    mime_type = magic.from_file(os.fspath(path), mime=True)
    logger.debug("Detected %s for %s", mime_type, path)
    return mime_type
