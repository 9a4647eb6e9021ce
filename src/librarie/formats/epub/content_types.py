# ABOUTME: Extension-based content type guessing for archive entries.
# ABOUTME: Fixed table; anything unmapped is served as application/octet-stream.

from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".xhtml": "application/xhtml+xml",
    ".html": "application/xhtml+xml",
    ".htm": "application/xhtml+xml",
    ".css": "text/css",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".woff2": "font/woff2",
    ".woff": "font/woff",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".mp3": "audio/mpeg",
    ".mp4": "video/mp4",
}


def guess_content_type(name: str | None) -> str:
    """Map a file name or archive path to a MIME type by its extension."""
    if not name:
        return DEFAULT_CONTENT_TYPE
    suffix = PurePosixPath(name.replace("\\", "/")).suffix.lower()
    return CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)
