"""Extension to content type lookup.

Resolution is purely table driven and never touches the file. For the
type of a file's actual content see :mod:`filekit.mime`.
"""

from __future__ import annotations

from typing import Literal

# Extensions whose content type is simply "<group>/<extension>".
CONTENT_TYPE_GROUPS: dict[str, frozenset[str]] = {
    "image": frozenset({"gif", "png", "webp", "bmp", "avif"}),
    "text": frozenset({"css", "csv"}),
    "video": frozenset({"mp4", "webm"}),
    "application": frozenset({"zip", "xml", "rtf", "pdf", "json"}),
    "font": frozenset({"woff2", "woff", "ttf", "otf"}),
    "audio": frozenset({"wav", "pus", "aac"}),
}

CONTENT_TYPES: dict[str, str] = {
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "svg": "image/svg+xml",
    "text": "text/plain",
    "doc": "application/msword",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "7z": "application/x-7z-compressed",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "xul": "application/vnd.mozilla.xul+xml",
    "3gp": "video/3gpp",
    "3g2": "video/3gpp2",
    "xhtml": "application/xhtml+xml",
    "xls": "application/vnd.ms-excel",
    "vsd": "application/vnd.visio",
    "rar": "application/vnd.rar",
    "ts": "video/mp2t",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "tar": "application/x-tar",
    "sh": "application/x-sh",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "ppt": "application/vnd.ms-powerpoint",
    "php": "application/x-httpd-php",
    "ogx": "application/ogg",
    "ogv": "video/ogg",
    "mp3": "audio/mpeg",
    "mid": "audio/midi",
    "midi": "audio/midi",
    "jsonld": "application/ld+json",
    "jar": "application/java-archive",
    "ics": "text/calendar",
    "ico": "image/vnd.microsoft.icon",
    "htm": "text/html",
    "html": "text/html",
    "gz": "application/gzip",
    "epub": "application/epub+zip",
    "eot": "application/vnd.ms-fontobject",
    "csh": "application/x-csh",
    "cda": "application/x-cdf",
    "bz2": "application/x-bzip2",
    "bz": "application/x-bzip",
    "bin": "application/octet-stream",
    "awz": "application/vnd.amazon.ebook",
    "avi": "video/x-msvideo",
    "arc": "application/x-freearc",
    "abw": "application/x-abiword",
    "x3d": "application/vnd.hzn-3d-crossword",
    "mseq": "application/vnd.mseq",
    "pwn": "application/vnd.3m.post-it-notes",
    "ace": "application/x-ace-compressed",
    "dir": "application/x-director",
    "apk": "application/vnd.android.package-archive",
    "aiff": "audio/x-aiff",
    "atom": "application/atom+xml",
    "torrent": "application/x-bittorrent",
    "c": "text/x-c",
    "deb": "application/x-debian-package",
    "dts": "audio/vnd.dts",
    "flv": "video/x-flv",
    "f4v": "video/x-f4v",
    "cer": "application/pkix-cert",
    "java": "text/x-java-source",
    "jsx": "text/jsx",
    "kml": "application/vnd.google-earth.kml+xml",
    "kmz": "application/vnd.google-earth.kmz",
    "m4a": "audio/x-m4a",
    "m4v": "video/x-m4v",
    "m4p": "application/mp4",
    "m4u": "video/vnd.mpegurl",
    "m3u8": "application/vnd.apple.mpegurl",
    "m3u": "audio/x-mpegurl",
    "latex": "application/x-latex",
    "kwd": "application/vnd.kde.kword",
    "kon": "application/vnd.kde.kontour",
    "ser": "application/java-serialized-object",
    "karbon": "application/vnd.kde.karbon",
    "kfo": "application/vnd.kde.kformula",
    "flw": "application/vnd.kde.kivio",
    "mkv": "video/x-matroska",
    "mpg": "video/mpeg",
    "mpeg": "video/mpeg",
    "flac": "audio/flac",
    "txt": "text/plain",
    "md": "text/markdown",
    "vcf": "text/vcard",
    "odt": "application/vnd.oasis.opendocument.text",
    "ods": "application/vnd.oasis.opendocument.spreadsheet",
    "odp": "application/vnd.oasis.opendocument.presentation",
    "odg": "application/vnd.oasis.opendocument.graphics",
    "heic": "image/heic",
    "heif": "image/heif",
}


def get_content_type(extension: str) -> str | Literal[False]:
    """Look up the content type for a file extension.

    Args:
        extension: Extension without the leading dot, e.g. ``"png"``.

    Returns:
        The content type, or False when the extension is not known.

    Example:
        >>> get_content_type("png")
        'image/png'
        >>> get_content_type("unknownext")
        False
    """
    for group, extensions in CONTENT_TYPE_GROUPS.items():
        if extension in extensions:
            return f"{group}/{extension}"

    return CONTENT_TYPES.get(extension, False)
