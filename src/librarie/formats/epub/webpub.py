# ABOUTME: Builds a Readium Web Publication Manifest for an opened EPUB.
# ABOUTME: Resource links point at a caller-supplied base URL that proxies archive entries.

import logging
import zipfile
from typing import Any

from librarie.formats.epub.content_types import guess_content_type
from librarie.formats.epub.errors import EpubError
from librarie.formats.epub.navigation import extract_toc_links
from librarie.formats.epub.package import PublicationInfo

logger = logging.getLogger(__name__)

WEBPUB_CONTEXT = "https://readium.org/webpub-manifest/context.jsonld"
WEBPUB_MEDIA_TYPE = "application/webpub+json"
DEFAULT_LANGUAGE = "en"


def _resource_url(resources_base: str, zip_path: str) -> str:
    normalized = zip_path.replace("\\", "/")
    return f"{resources_base.rstrip('/')}/{normalized}"


def build_webpub_manifest(
    info: PublicationInfo,
    *,
    self_href: str,
    resources_base: str,
    fallback_title: str | None = None,
) -> dict[str, Any]:
    """Describe a publication as a Readium Web Publication Manifest.

    Args:
        info: Publication opened by open_publication().
        self_href: Absolute URL the manifest itself is served from.
        resources_base: URL prefix under which archive entries are served.
        fallback_title: Title used when the package document declares none.

    Returns:
        A JSON-serializable manifest dictionary.
    """
    title = info.title or fallback_title or info.archive_path.stem
    manifest: dict[str, Any] = {
        "@context": [WEBPUB_CONTEXT],
        "metadata": {
            "title": title,
            "language": info.language or DEFAULT_LANGUAGE,
        },
    }

    manifest["readingOrder"] = [
        {
            "href": _resource_url(resources_base, zip_path),
            "type": info.media_type_of(zip_path) or guess_content_type(zip_path),
        }
        for zip_path in info.spine_hrefs
    ]

    resources = []
    for href, media_type in info.manifest_href_to_media_type.items():
        link = {"href": _resource_url(resources_base, info.zip_path(href))}
        if media_type:
            link["type"] = media_type
        resources.append(link)
    manifest["resources"] = resources

    try:
        toc = extract_toc_links(info)
    except (EpubError, OSError, zipfile.BadZipFile) as exc:
        logger.warning("Skipping table of contents for %s: %s", info.archive_path, exc)
        toc = []
    if toc:
        manifest["toc"] = [{"href": _resource_url(resources_base, link.href)} for link in toc]

    manifest["links"] = [
        {"rel": ["self"], "href": self_href, "type": WEBPUB_MEDIA_TYPE},
    ]
    return manifest
