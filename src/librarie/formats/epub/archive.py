# ABOUTME: Per-call zip archive access for EPUB files.
# ABOUTME: Every operation opens its own handle; nothing is cached between calls.

import zipfile
import zlib
from pathlib import Path

from librarie.formats.epub.errors import CorruptContainerError


def open_archive(path: Path) -> zipfile.ZipFile:
    """Open an EPUB as a zip archive for reading.

    The caller owns the returned handle and must close it, normally with a
    ``with`` block.

    Raises:
        CorruptContainerError: If the file is not a readable zip archive.
        OSError: If the file cannot be opened at all.
    """
    try:
        return zipfile.ZipFile(path, "r")
    except zipfile.BadZipFile as exc:
        raise CorruptContainerError(f"Not a zip archive: {path}: {exc}") from exc


# What ZipFile.read raises when an existing entry is damaged.
MEMBER_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError)


def read_member(archive: zipfile.ZipFile, zip_path: str) -> bytes | None:
    """Read an entry fully, or return None if the archive has no such entry.

    Raises:
        CorruptContainerError: If the entry exists but cannot be decompressed.
    """
    try:
        return archive.read(zip_path)
    except KeyError:
        return None
    except MEMBER_READ_ERRORS as exc:
        raise CorruptContainerError(f"Damaged entry {zip_path} in {archive.filename}: {exc}") from exc
