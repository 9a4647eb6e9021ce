# ABOUTME: Shared pytest fixtures for Librarie tests.
# ABOUTME: Provides EPUB archives (EPUB3, EPUB2, ebooklib-written, corrupt) for testing.

from pathlib import Path

import pytest
from ebooklib import epub

from tests.fixtures.epub_archives import (
    EPUB2_FILES,
    EPUB3_FILES,
    PLACEHOLDER_JPEG,
    SCENARIO_FILES,
    write_epub,
)


@pytest.fixture
def scenario_epub(tmp_path: Path) -> Path:
    """The minimal reference book: OEBPS/content.opf, one cover, one chapter."""
    return write_epub(tmp_path / "scenario.epub", SCENARIO_FILES)


@pytest.fixture
def epub3_book(tmp_path: Path) -> Path:
    """An EPUB3 book with nav document, cover-image property and a stale NCX."""
    return write_epub(tmp_path / "cartographer.epub", EPUB3_FILES)


@pytest.fixture
def epub2_book(tmp_path: Path) -> Path:
    """An EPUB2 book with prefixed OPF elements, meta cover and NCX only."""
    return write_epub(tmp_path / "harbour.epub", EPUB2_FILES)


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """Create a valid EPUB with ebooklib, as an independent producer."""
    book = epub.EpubBook()

    book.set_identifier("test-isbn-978-0-123456-47-2")
    book.set_title("The Name of the Rose")
    book.set_language("en")
    book.add_author("Umberto Eco")

    book.add_metadata("DC", "publisher", "Harcourt")
    book.add_metadata("DC", "description", "A mystery set in a medieval monastery.")
    book.set_cover("cover.jpg", PLACEHOLDER_JPEG, create_page=False)

    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    filepath = tmp_path / "name_of_the_rose.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """Create a corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath
