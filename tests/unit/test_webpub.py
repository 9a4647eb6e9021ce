# ABOUTME: Unit tests for the Readium Web Publication Manifest builder.
# ABOUTME: Checks metadata defaults, reading order, resources, TOC, and the self link.

import json
from pathlib import Path

from librarie.formats.epub import build_webpub_manifest, open_publication
from tests.fixtures.epub_archives import build_opf, container_xml, write_epub

BASE = "https://books.example/api/books/42"


def _manifest(path: Path, **kwargs) -> dict:
    return build_webpub_manifest(
        open_publication(path),
        self_href=f"{BASE}/manifest.json",
        resources_base=f"{BASE}/resources/",
        **kwargs,
    )


class TestBuildWebpubManifest:
    def test_context_and_metadata(self, epub3_book: Path) -> None:
        manifest = _manifest(epub3_book)
        assert manifest["@context"] == ["https://readium.org/webpub-manifest/context.jsonld"]
        assert manifest["metadata"] == {"title": "The Cartographer's Daughter", "language": "en"}

    def test_reading_order_follows_spine(self, epub3_book: Path) -> None:
        manifest = _manifest(epub3_book)
        assert manifest["readingOrder"] == [
            {"href": f"{BASE}/resources/OEBPS/text/chap1.xhtml", "type": "application/xhtml+xml"},
            {"href": f"{BASE}/resources/OEBPS/text/chap2.xhtml", "type": "application/xhtml+xml"},
        ]

    def test_reading_order_type_is_guessed_when_undeclared(self, tmp_path: Path) -> None:
        opf = build_opf([("c1", "c1.html", None, None)], ["c1"])
        path = write_epub(
            tmp_path / "plain.epub",
            {"META-INF/container.xml": container_xml("content.opf"), "content.opf": opf},
        )
        manifest = _manifest(path)
        assert manifest["readingOrder"][0]["type"] == "application/xhtml+xml"
        assert manifest["resources"] == []

    def test_resources_cover_manifest(self, epub3_book: Path) -> None:
        hrefs = {link["href"] for link in _manifest(epub3_book)["resources"]}
        assert f"{BASE}/resources/OEBPS/images/cover.jpg" in hrefs
        assert f"{BASE}/resources/OEBPS/styles/book.css" in hrefs
        assert len(hrefs) == 7

    def test_toc_links(self, epub3_book: Path) -> None:
        toc = _manifest(epub3_book)["toc"]
        assert toc[1] == {"href": f"{BASE}/resources/OEBPS/text/chap1.xhtml#s2"}

    def test_toc_omitted_when_empty(self, scenario_epub: Path) -> None:
        assert "toc" not in _manifest(scenario_epub)

    def test_self_link(self, scenario_epub: Path) -> None:
        assert _manifest(scenario_epub)["links"] == [
            {"rel": ["self"], "href": f"{BASE}/manifest.json", "type": "application/webpub+json"}
        ]

    def test_title_and_language_fallbacks(self, tmp_path: Path) -> None:
        opf = build_opf([], [], metadata="")
        path = write_epub(
            tmp_path / "nameless.epub",
            {"META-INF/container.xml": container_xml("content.opf"), "content.opf": opf},
        )
        assert _manifest(path)["metadata"] == {"title": "nameless", "language": "en"}
        assert _manifest(path, fallback_title="From Catalog")["metadata"]["title"] == "From Catalog"

    def test_is_json_serializable(self, epub2_book: Path) -> None:
        assert json.loads(json.dumps(_manifest(epub2_book)))["metadata"]["language"] == "en-GB"
