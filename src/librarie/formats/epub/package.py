# ABOUTME: Package document (OPF) parsing into an immutable PublicationInfo.
# ABOUTME: open_publication() is the entry point that turns any structural failure into None.

import logging
import zipfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from lxml import etree

from librarie.formats.epub import markup
from librarie.formats.epub.archive import open_archive, read_member
from librarie.formats.epub.container import CONTAINER_PATH, locate_package_document
from librarie.formats.epub.errors import (
    CorruptContainerError,
    EpubError,
    MalformedPackageDocumentError,
    MissingPackageDocumentError,
    NotAnEpubError,
)
from librarie.formats.epub.paths import build_zip_path, parent_dir

logger = logging.getLogger(__name__)

EPUB_EXTENSION = ".epub"

def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class PublicationInfo:
    """Structure of one EPUB as read from its package document.

    Manifest mappings are keyed by hrefs exactly as written in the OPF
    (relative to ``package_document_dir``). ``spine_hrefs`` holds resolved
    archive paths in reading order, so each one is
    ``build_zip_path(package_document_dir, href)`` for some manifest href.
    """

    archive_path: Path
    package_document_path: str
    package_document_dir: str = ""
    title: str | None = None
    language: str | None = None
    spine_hrefs: tuple[str, ...] = ()
    manifest_id_to_href: Mapping[str, str] = field(default_factory=_empty_mapping)
    manifest_href_to_media_type: Mapping[str, str] = field(default_factory=_empty_mapping)
    manifest_id_to_properties: Mapping[str, str] = field(default_factory=_empty_mapping)
    legacy_toc_id: str | None = None

    def zip_path(self, href: str) -> str:
        """Archive path of a manifest href."""
        return build_zip_path(self.package_document_dir, href)

    def media_type_of(self, zip_path: str) -> str | None:
        """Manifest media type of the entry at an archive path, if declared."""
        for href, media_type in self.manifest_href_to_media_type.items():
            if self.zip_path(href) == zip_path:
                return media_type
        return None


def read_package_root(archive: zipfile.ZipFile, package_document_path: str) -> etree._Element:
    """Load and parse the package document.

    Raises:
        MissingPackageDocumentError: If the archive has no such entry.
        MalformedPackageDocumentError: If the entry is not well-formed XML.
    """
    raw = read_member(archive, package_document_path)
    if raw is None:
        raise MissingPackageDocumentError(
            f"Package document not found: {package_document_path}"
        )
    try:
        return markup.parse_xml(raw)
    except etree.XMLSyntaxError as exc:
        raise MalformedPackageDocumentError(
            f"Malformed package document {package_document_path}: {exc}"
        ) from exc


def _manifest_maps(
    root: etree._Element,
) -> tuple[dict[str, str], dict[str, str], dict[str, str]]:
    """Collect id->href, href->media-type and id->properties from the manifest."""
    id_to_href: dict[str, str] = {}
    href_to_type: dict[str, str] = {}
    id_to_props: dict[str, str] = {}
    for item in markup.children(markup.path(root, "package", "manifest"), "item"):
        item_id = item.get("id")
        href = item.get("href")
        # Items without both an id and an href cannot be referenced; skip them.
        if not item_id or not href:
            continue
        id_to_href[item_id] = href
        media_type = item.get("media-type")
        if media_type is not None:
            href_to_type[href] = media_type
        properties = item.get("properties")
        if properties is not None:
            id_to_props[item_id] = properties
    return id_to_href, href_to_type, id_to_props


def parse_package_document(
    archive: zipfile.ZipFile, archive_path: Path, package_document_path: str
) -> PublicationInfo:
    """Parse the package document into a PublicationInfo.

    Individual manifest items and spine entries are best-effort: an item
    lacking an id or href is ignored and an itemref pointing at an unknown
    id is skipped without aborting the parse.

    Args:
        archive: The open EPUB archive.
        archive_path: Filesystem path of the archive, recorded on the result.
        package_document_path: Archive path of the OPF.

    Returns:
        The parsed PublicationInfo.

    Raises:
        MissingPackageDocumentError: If the OPF entry does not exist.
        MalformedPackageDocumentError: If the OPF is not well-formed.
    """
    package_dir = parent_dir(package_document_path)
    root = read_package_root(archive, package_document_path)

    metadata = markup.path(root, "package", "metadata")
    title = markup.text(markup.child(metadata, "title"))
    language = markup.text(markup.child(metadata, "language"))

    id_to_href, href_to_type, id_to_props = _manifest_maps(root)

    spine = markup.path(root, "package", "spine")
    spine_hrefs: list[str] = []
    for itemref in markup.children(spine, "itemref"):
        href = id_to_href.get(itemref.get("idref") or "")
        if href is None:
            logger.debug("Skipping unresolvable itemref %r", itemref.get("idref"))
            continue
        spine_hrefs.append(build_zip_path(package_dir, href))

    toc_id = spine.get("toc") if spine is not None else None

    return PublicationInfo(
        archive_path=archive_path,
        package_document_path=package_document_path,
        package_document_dir=package_dir,
        title=title,
        language=language,
        spine_hrefs=tuple(spine_hrefs),
        manifest_id_to_href=MappingProxyType(id_to_href),
        manifest_href_to_media_type=MappingProxyType(href_to_type),
        manifest_id_to_properties=MappingProxyType(id_to_props),
        legacy_toc_id=toc_id.strip() if toc_id and toc_id.strip() else None,
    )


def load_publication(path: Path) -> PublicationInfo:
    """Open an EPUB and parse its structure, raising on any structural failure.

    Args:
        path: Filesystem path to an .epub file, already sandboxed by the caller.

    Returns:
        The PublicationInfo for the archive.

    Raises:
        NotAnEpubError: If the path lacks the .epub extension or does not exist.
        CorruptContainerError: If the archive or its container document is unusable.
        MissingPackageDocumentError: If the container points at a missing entry.
        MalformedPackageDocumentError: If the package document is not well-formed.
    """
    path = Path(path)
    if path.suffix.lower() != EPUB_EXTENSION:
        raise NotAnEpubError(f"Not an EPUB file: {path}")
    if not path.is_file():
        raise NotAnEpubError(f"File not found: {path}")

    archive_path = path.resolve()
    try:
        with open_archive(archive_path) as archive:
            package_document_path = locate_package_document(archive)
            if package_document_path is None:
                raise CorruptContainerError(
                    f"No usable {CONTAINER_PATH} in {archive_path}"
                )
            return parse_package_document(archive, archive_path, package_document_path)
    except OSError as exc:
        raise CorruptContainerError(f"Failed to read EPUB: {archive_path}: {exc}") from exc


def open_publication(path: Path) -> PublicationInfo | None:
    """Open an EPUB, returning None when it has no readable publication structure.

    Wrong extension, missing file, corrupt container and a missing or
    malformed package document are all reported the same way, because the
    only sensible reaction to any of them is to treat the book as unreadable.
    """
    try:
        return load_publication(path)
    except EpubError as exc:
        logger.debug("Cannot open publication %s: %s", path, exc)
        return None
