# ABOUTME: Dublin Core metadata extraction from the package document.
# ABOUTME: Runs its own parse of the OPF and never raises; failures yield None.

import logging
import re
import zipfile
from dataclasses import dataclass

from lxml import etree

from librarie.formats.epub import markup
from librarie.formats.epub.archive import open_archive
from librarie.formats.epub.errors import EpubError
from librarie.formats.epub.package import PublicationInfo, read_package_root

logger = logging.getLogger(__name__)

_ISBN_PREFIXES = ("urn:isbn:", "isbn:")
_NON_ISBN_CHARS_RE = re.compile(r"[^0-9x]")


@dataclass(frozen=True)
class CoreMetadata:
    """Descriptive fields read from the package document's metadata block."""

    title: str | None = None
    language: str | None = None
    creators: tuple[str, ...] = ()
    publisher: str | None = None
    identifier: str | None = None
    isbn: str | None = None
    description: str | None = None
    date: str | None = None
    subjects: tuple[str, ...] = ()

    @property
    def author(self) -> str:
        """Convenience property: joined creator string for display."""
        return ", ".join(self.creators)


def parse_isbn(identifier: str | None) -> str | None:
    """Best-effort ISBN from a dc:identifier value.

    ``urn:isbn:`` and ``isbn:`` prefixes are stripped; any other value keeps
    only its digits and x characters. The result counts as an ISBN only when
    it is exactly 10 or 13 characters long.
    """
    if not identifier:
        return None
    lowered = identifier.strip().lower()
    for prefix in _ISBN_PREFIXES:
        if lowered.startswith(prefix):
            candidate = lowered[len(prefix):]
            break
    else:
        candidate = _NON_ISBN_CHARS_RE.sub("", lowered)
    return candidate if len(candidate) in (10, 13) else None


def _texts(metadata: etree._Element | None, name: str) -> tuple[str, ...]:
    """Non-empty texts of every metadata child with the given local name."""
    values = (markup.text(node) for node in markup.children(metadata, name))
    return tuple(value for value in values if value)


def _first(metadata: etree._Element | None, name: str) -> str | None:
    return markup.text(markup.child(metadata, name))


def extract_core_metadata(info: PublicationInfo) -> CoreMetadata | None:
    """Extract title, creators, identifiers and other Dublin Core fields.

    Args:
        info: Publication opened by open_publication().

    Returns:
        CoreMetadata with every field that could be read, or None if the
        archive or its package document cannot be read.
    """
    try:
        with open_archive(info.archive_path) as archive:
            root = read_package_root(archive, info.package_document_path)
    except (EpubError, OSError, zipfile.BadZipFile) as exc:
        logger.warning("Could not read metadata from %s: %s", info.archive_path, exc)
        return None

    metadata = markup.path(root, "package", "metadata")
    identifier = _first(metadata, "identifier")
    return CoreMetadata(
        title=_first(metadata, "title"),
        language=_first(metadata, "language"),
        creators=_texts(metadata, "creator"),
        publisher=_first(metadata, "publisher"),
        identifier=identifier,
        isbn=parse_isbn(identifier),
        description=_first(metadata, "description"),
        date=_first(metadata, "date"),
        subjects=_texts(metadata, "subject"),
    )
