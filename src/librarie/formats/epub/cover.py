# ABOUTME: Cover image discovery through an ordered list of fallback strategies.
# ABOUTME: Also hosts the first-page image heuristic used as the last cover strategy.

import logging
import re
import zipfile
from collections.abc import Callable

from librarie.formats.epub import markup
from librarie.formats.epub.archive import open_archive, read_member
from librarie.formats.epub.errors import EpubError
from librarie.formats.epub.package import PublicationInfo, read_package_root
from librarie.formats.epub.paths import parent_dir, resolve_zip_path

logger = logging.getLogger(__name__)

FIRST_PAGE_SCAN_LIMIT = 5

_RASTER_MEDIA_TYPES = ("image/jpeg", "image/png")

# Double-quoted src only; single-quoted or entity-encoded paths are not matched.
_IMG_SRC_RE = re.compile(r'<img[^>]+src="([^"]+)"', re.IGNORECASE)

CoverStrategy = Callable[[PublicationInfo, zipfile.ZipFile], str | None]


def _cover_from_properties(info: PublicationInfo, archive: zipfile.ZipFile) -> str | None:
    """EPUB3: manifest item carrying the cover-image property."""
    for item_id, properties in info.manifest_id_to_properties.items():
        if "cover-image" not in properties.split():
            continue
        href = info.manifest_id_to_href.get(item_id)
        if href is not None:
            return info.zip_path(href)
    return None


def _cover_from_meta(info: PublicationInfo, archive: zipfile.ZipFile) -> str | None:
    """EPUB2: <meta name="cover" content="manifest-id"/>."""
    root = read_package_root(archive, info.package_document_path)
    metadata = markup.path(root, "package", "metadata")
    for meta in markup.children(metadata, "meta"):
        if meta.get("name") != "cover":
            continue
        cover_id = (meta.get("content") or "").strip()
        href = info.manifest_id_to_href.get(cover_id)
        if href is not None:
            return info.zip_path(href)
        return None
    return None


def _cover_from_first_raster(info: PublicationInfo, archive: zipfile.ZipFile) -> str | None:
    """First JPEG or PNG declared in the manifest."""
    for href, media_type in info.manifest_href_to_media_type.items():
        if media_type.strip().lower() in _RASTER_MEDIA_TYPES:
            return info.zip_path(href)
    return None


def _first_page_image(info: PublicationInfo, archive: zipfile.ZipFile) -> str | None:
    """Image used as a spine item, or the first <img> of the opening documents."""
    media_types = [info.media_type_of(zip_path) or "" for zip_path in info.spine_hrefs]

    for zip_path, media_type in zip(info.spine_hrefs, media_types):
        if media_type.lower().startswith("image/"):
            return zip_path

    scanned = 0
    for zip_path, media_type in zip(info.spine_hrefs, media_types):
        if "html" not in media_type.lower():
            continue
        if scanned >= FIRST_PAGE_SCAN_LIMIT:
            break
        scanned += 1
        raw = read_member(archive, zip_path)
        if raw is None:
            continue
        match = _IMG_SRC_RE.search(raw.decode("utf-8", errors="replace"))
        if match:
            return resolve_zip_path(parent_dir(zip_path), match.group(1))
    return None


COVER_STRATEGIES: tuple[CoverStrategy, ...] = (
    _cover_from_properties,
    _cover_from_meta,
    _cover_from_first_raster,
    _first_page_image,
)


def _run(
    info: PublicationInfo, strategies: tuple[CoverStrategy, ...]
) -> str | None:
    """Try each strategy against a single archive handle until one succeeds."""
    try:
        with open_archive(info.archive_path) as archive:
            for strategy in strategies:
                found = strategy(info, archive)
                if found:
                    logger.debug("Cover for %s found via %s", info.archive_path, strategy.__name__)
                    return found
    except (EpubError, OSError, zipfile.BadZipFile) as exc:
        logger.warning("Could not search %s for a cover: %s", info.archive_path, exc)
    return None


def find_cover_image_zip_path(info: PublicationInfo) -> str | None:
    """Locate the archive path of the publication's cover image.

    Strategies run in priority order: the EPUB3 cover-image property, the
    EPUB2 meta cover pointer, the first JPEG/PNG in the manifest, and
    finally an image taken from the first pages. None means the book has
    no discoverable cover and callers should use a placeholder.
    """
    return _run(info, COVER_STRATEGIES)


def find_first_page_image_zip_path(info: PublicationInfo) -> str | None:
    """Find an image representing the first page of the publication.

    A spine item that is itself an image wins. Otherwise the first
    FIRST_PAGE_SCAN_LIMIT HTML spine documents are scanned for a
    double-quoted ``<img src="...">``, resolved relative to the document
    that contains it. This is a text heuristic, not an HTML parser.
    """
    return _run(info, (_first_page_image,))
