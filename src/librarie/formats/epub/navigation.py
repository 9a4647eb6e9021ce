# ABOUTME: Table-of-contents extraction from the EPUB3 nav document or the EPUB2 NCX.
# ABOUTME: Links are resolved to archive paths, deduplicated, and kept in document order.

import logging
import zipfile
from typing import NamedTuple

from lxml import etree

from librarie.formats.epub import markup
from librarie.formats.epub.archive import open_archive, read_member
from librarie.formats.epub.package import PublicationInfo
from librarie.formats.epub.paths import parent_dir, resolve_zip_path, split_fragment

logger = logging.getLogger(__name__)

NCX_MEDIA_TYPE = "application/x-dtbncx+xml"


class TocLink(NamedTuple):
    """A table-of-contents target inside the archive."""

    path: str
    fragment: str | None = None

    @property
    def href(self) -> str:
        """The link rendered back as ``path#fragment``."""
        return f"{self.path}#{self.fragment}" if self.fragment is not None else self.path


def _to_link(base_dir: str, href: str) -> TocLink:
    path, fragment = split_fragment(resolve_zip_path(base_dir, href.strip()))
    return TocLink(path, fragment)


def _load(archive: zipfile.ZipFile, zip_path: str) -> etree._Element | None:
    """Parse a navigation document, or None if it is missing or malformed."""
    raw = read_member(archive, zip_path)
    if raw is None:
        logger.debug("Navigation document %s is missing", zip_path)
        return None
    try:
        return markup.parse_xml(raw)
    except etree.XMLSyntaxError as exc:
        logger.warning("Ignoring malformed navigation document %s: %s", zip_path, exc)
        return None


def _nav_document_path(info: PublicationInfo) -> str | None:
    for item_id, properties in info.manifest_id_to_properties.items():
        if "nav" not in properties.split():
            continue
        href = info.manifest_id_to_href.get(item_id)
        if href is not None:
            return info.zip_path(href)
    return None


def _is_toc_nav(nav: etree._Element) -> bool:
    nav_type = markup.attr(nav, "type") or ""
    return "toc" in nav_type or nav.get("role") == "doc-toc"


def _nav_links(info: PublicationInfo, archive: zipfile.ZipFile) -> list[TocLink]:
    """Links under <nav epub:type="toc"> (or role="doc-toc") in the nav document."""
    nav_path = _nav_document_path(info)
    if nav_path is None:
        return []
    root = _load(archive, nav_path)
    if root is None:
        return []

    base_dir = parent_dir(nav_path)
    links: list[TocLink] = []
    for nav in markup.descendants(root, "nav"):
        if not _is_toc_nav(nav):
            continue
        for anchor in markup.descendants(nav, "a"):
            href = anchor.get("href")
            if href is not None:
                links.append(_to_link(base_dir, href))
    return links


def _ncx_path(info: PublicationInfo) -> str | None:
    href = None
    if info.legacy_toc_id:
        href = info.manifest_id_to_href.get(info.legacy_toc_id)
    if href is None:
        for candidate, media_type in info.manifest_href_to_media_type.items():
            if media_type.strip().lower() == NCX_MEDIA_TYPE:
                href = candidate
                break
    return info.zip_path(href) if href is not None else None


def _ncx_links(info: PublicationInfo, archive: zipfile.ZipFile) -> list[TocLink]:
    """Every navMap content/@src of the EPUB2 NCX, nested points included."""
    ncx_path = _ncx_path(info)
    if ncx_path is None:
        return []
    root = _load(archive, ncx_path)
    if root is None:
        return []
    nav_map = markup.path(root, "ncx", "navMap")
    if nav_map is None:
        return []

    base_dir = parent_dir(ncx_path)
    links: list[TocLink] = []
    for content in markup.descendants(nav_map, "content"):
        src = content.get("src")
        if src is not None:
            links.append(_to_link(base_dir, src))
    return links


def extract_toc_links(info: PublicationInfo) -> list[TocLink]:
    """Extract the ordered table of contents of a publication.

    The EPUB3 nav document is preferred; the EPUB2 NCX is consulted only
    when the nav yields no links. Duplicate targets keep their first
    position. A publication with neither document has an empty TOC.

    Args:
        info: Publication opened by open_publication().

    Returns:
        TocLink values in reading order.

    Raises:
        CorruptContainerError: If the archive can no longer be opened.
        OSError: If the archive file cannot be read.
    """
    with open_archive(info.archive_path) as archive:
        links = _nav_links(info, archive)
        if not links:
            links = _ncx_links(info, archive)
    return list(dict.fromkeys(links))
