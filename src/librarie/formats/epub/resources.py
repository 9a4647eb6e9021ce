# ABOUTME: Reads and streams individual archive entries of an opened publication.
# ABOUTME: Streams own their archive handle and release it exactly once on close.

import io
import zipfile
from contextlib import ExitStack
from dataclasses import dataclass
from datetime import datetime, timezone

from librarie.formats.epub.archive import MEMBER_READ_ERRORS, open_archive
from librarie.formats.epub.errors import CorruptContainerError, ResourceNotFoundError
from librarie.formats.epub.package import PublicationInfo


@dataclass(frozen=True)
class EntryStat:
    """Size and caching validators for one archive entry."""

    name: str
    size: int
    crc: int
    last_modified: datetime
    etag: str


class EntryStream(io.RawIOBase):
    """Readable stream over one archive entry that also owns the archive.

    Closing the stream closes the member stream and then the archive, even
    if closing the member fails.
    """

    def __init__(self, archive: zipfile.ZipFile, member: io.BufferedIOBase, name: str) -> None:
        super().__init__()
        self._archive = archive
        self._member = member
        self.name = name

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        try:
            return self._member.readinto(buffer)
        except MEMBER_READ_ERRORS as exc:
            raise CorruptContainerError(f"Damaged entry {self.name}: {exc}") from exc

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._member.close()
        finally:
            try:
                self._archive.close()
            finally:
                super().close()


def _member_info(archive: zipfile.ZipFile, zip_path: str) -> zipfile.ZipInfo:
    try:
        return archive.getinfo(zip_path)
    except KeyError as exc:
        raise ResourceNotFoundError(zip_path) from exc


def read_entry_bytes(info: PublicationInfo, zip_path: str) -> bytes:
    """Read an archive entry fully into memory.

    Args:
        info: Publication the entry belongs to.
        zip_path: Archive-internal path of the entry.

    Returns:
        The entry's decompressed bytes.

    Raises:
        ResourceNotFoundError: If the archive has no such entry.
        CorruptContainerError: If the entry is damaged.
    """
    with open_archive(info.archive_path) as archive:
        member = _member_info(archive, zip_path)
        try:
            return archive.read(member)
        except MEMBER_READ_ERRORS as exc:
            raise CorruptContainerError(f"Damaged entry {zip_path}: {exc}") from exc


def open_entry_stream(info: PublicationInfo, zip_path: str) -> EntryStream:
    """Open a streaming reader over an archive entry.

    The archive is opened for this call only. On success its handle is
    handed to the returned stream, which the caller must close (ideally in
    a ``with`` block); if the entry is missing the handle is closed before
    the error propagates.

    Raises:
        ResourceNotFoundError: If the archive has no such entry.
    """
    with ExitStack() as stack:
        archive = stack.enter_context(open_archive(info.archive_path))
        member = archive.open(_member_info(archive, zip_path))
        stack.pop_all()
    return EntryStream(archive, member, zip_path)


def stat_entry(info: PublicationInfo, zip_path: str) -> EntryStat:
    """Describe an entry for HTTP caching: size, CRC, Last-Modified and a weak ETag.

    Raises:
        ResourceNotFoundError: If the archive has no such entry.
    """
    archive_mtime = info.archive_path.stat().st_mtime
    with open_archive(info.archive_path) as archive:
        member = _member_info(archive, zip_path)

    try:
        entry_mtime = datetime(*member.date_time, tzinfo=timezone.utc).timestamp()
    except ValueError:
        # Some writers leave the DOS date fields zeroed.
        entry_mtime = 0.0
    last_modified = datetime.fromtimestamp(max(archive_mtime, entry_mtime), tz=timezone.utc)
    etag = 'W/"{}-{:x}-{:x}-{:x}"'.format(
        info.archive_path.name,
        int(archive_mtime * 1000),
        member.CRC,
        member.file_size,
    )
    return EntryStat(
        name=zip_path,
        size=member.file_size,
        crc=member.CRC,
        last_modified=last_modified,
        etag=etag,
    )
