# ABOUTME: Resolves stored book paths inside the library root before opening them.
# ABOUTME: Rejects paths that escape the root so the EPUB engine only sees sandboxed files.

import logging
from pathlib import Path

from librarie.formats.epub import PublicationInfo, open_publication

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_ROOT = Path.home() / ".librarie" / "books"


def resolve_library_path(root: Path, stored: str) -> Path | None:
    """Turn a stored book path into an absolute path inside the library root.

    Stored paths are relative to the root; a leading slash or backslash is
    ignored. Paths that resolve outside the root (through ``..`` or
    symlinks) or that do not exist are rejected.

    Args:
        root: The library's storage directory.
        stored: Path as recorded in the catalog.

    Returns:
        The resolved file path, or None if it is unsafe or missing.
    """
    if not stored:
        return None
    base = Path(root).resolve()
    relative = stored.replace("\\", "/").lstrip("/")
    candidate = (base / relative).resolve()
    if not candidate.is_relative_to(base):
        logger.warning("Rejecting stored path outside library root: %s", stored)
        return None
    if not candidate.exists():
        return None
    return candidate


def open_stored_publication(root: Path, stored: str) -> PublicationInfo | None:
    """Open a cataloged EPUB by its stored path, or None if it is unavailable."""
    path = resolve_library_path(root, stored)
    if path is None:
        return None
    return open_publication(path)
