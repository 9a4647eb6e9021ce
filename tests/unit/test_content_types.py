# ABOUTME: Unit tests for extension-based content type guessing.
# ABOUTME: Checks the full mapping table, case-insensitivity, and the default type.

import pytest

from librarie.formats.epub.content_types import DEFAULT_CONTENT_TYPE, guess_content_type


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("text/chap1.xhtml", "application/xhtml+xml"),
        ("index.html", "application/xhtml+xml"),
        ("old.htm", "application/xhtml+xml"),
        ("styles/book.css", "text/css"),
        ("images/diagram.svg", "image/svg+xml"),
        ("images/map.png", "image/png"),
        ("cover.jpg", "image/jpeg"),
        ("cover.jpeg", "image/jpeg"),
        ("anim.gif", "image/gif"),
        ("fonts/serif.woff2", "font/woff2"),
        ("fonts/serif.woff", "font/woff"),
        ("fonts/serif.ttf", "font/ttf"),
        ("fonts/serif.otf", "font/otf"),
        ("audio/track.mp3", "audio/mpeg"),
        ("video/clip.mp4", "video/mp4"),
    ],
)
def test_known_extensions(name: str, expected: str) -> None:
    assert guess_content_type(name) == expected


def test_extension_is_case_insensitive() -> None:
    assert guess_content_type("cover.JPG") == "image/jpeg"


def test_unknown_extension_is_octet_stream() -> None:
    assert guess_content_type("unknown.xyz") == "application/octet-stream"


@pytest.mark.parametrize("name", ["", None, "README", "toc.ncx"])
def test_unmapped_names_fall_back(name: str | None) -> None:
    assert guess_content_type(name) == DEFAULT_CONTENT_TYPE
