# ABOUTME: EPUB container introspection: structure, metadata, cover, TOC and resources.
# ABOUTME: Re-exports the public operations; each call opens and closes its own archive handle.

from librarie.formats.epub.content_types import guess_content_type
from librarie.formats.epub.cover import (
    find_cover_image_zip_path,
    find_first_page_image_zip_path,
)
from librarie.formats.epub.errors import (
    CorruptContainerError,
    EpubError,
    MalformedPackageDocumentError,
    MissingPackageDocumentError,
    NotAnEpubError,
    ResourceNotFoundError,
)
from librarie.formats.epub.metadata import CoreMetadata, extract_core_metadata, parse_isbn
from librarie.formats.epub.navigation import TocLink, extract_toc_links
from librarie.formats.epub.package import PublicationInfo, load_publication, open_publication
from librarie.formats.epub.paths import build_zip_path, resolve_zip_path
from librarie.formats.epub.resources import (
    EntryStat,
    EntryStream,
    open_entry_stream,
    read_entry_bytes,
    stat_entry,
)
from librarie.formats.epub.webpub import build_webpub_manifest

__all__ = [
    "CoreMetadata",
    "CorruptContainerError",
    "EntryStat",
    "EntryStream",
    "EpubError",
    "MalformedPackageDocumentError",
    "MissingPackageDocumentError",
    "NotAnEpubError",
    "PublicationInfo",
    "ResourceNotFoundError",
    "TocLink",
    "build_webpub_manifest",
    "build_zip_path",
    "extract_core_metadata",
    "extract_toc_links",
    "find_cover_image_zip_path",
    "find_first_page_image_zip_path",
    "guess_content_type",
    "load_publication",
    "open_entry_stream",
    "open_publication",
    "parse_isbn",
    "read_entry_bytes",
    "resolve_zip_path",
    "stat_entry",
]
