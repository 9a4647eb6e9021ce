# ABOUTME: Unit tests for archive path algebra.
# ABOUTME: Covers manifest href joining and in-resource link resolution with fragments.

import pytest

from librarie.formats.epub.paths import (
    build_zip_path,
    parent_dir,
    resolve_zip_path,
    split_fragment,
)


class TestBuildZipPath:
    """build_zip_path joins a manifest href onto the package directory."""

    def test_joins_directory_and_href(self) -> None:
        assert build_zip_path("OEBPS", "text/chap1.xhtml") == "OEBPS/text/chap1.xhtml"

    def test_directory_with_trailing_slash(self) -> None:
        assert build_zip_path("OEBPS/", "chap1.xhtml") == "OEBPS/chap1.xhtml"

    @pytest.mark.parametrize("package_dir", ["", "   ", "/", None])
    def test_root_directory_strips_leading_slash(self, package_dir: str | None) -> None:
        assert build_zip_path(package_dir, "/images/cover.jpg") == "images/cover.jpg"

    def test_backslashes_become_slashes(self) -> None:
        assert build_zip_path("OEBPS", "Text\\ch1.html") == "OEBPS/Text/ch1.html"

    def test_leading_slash_on_directory_is_removed(self) -> None:
        assert build_zip_path("/OEBPS", "a.xhtml") == "OEBPS/a.xhtml"

    def test_dot_segments_are_left_alone(self) -> None:
        assert build_zip_path("OEBPS", "../a.xhtml") == "OEBPS/../a.xhtml"


class TestResolveZipPath:
    """resolve_zip_path resolves links found inside archive resources."""

    def test_parent_segment(self) -> None:
        assert resolve_zip_path("OEBPS/nav", "../text/c1.xhtml") == "OEBPS/text/c1.xhtml"

    def test_fragment_is_preserved(self) -> None:
        assert resolve_zip_path("OEBPS", "chap1.xhtml#s2") == "OEBPS/chap1.xhtml#s2"

    def test_current_directory_segment(self) -> None:
        assert resolve_zip_path("OEBPS/text", "./c2.xhtml") == "OEBPS/text/c2.xhtml"

    def test_empty_base_directory(self) -> None:
        assert resolve_zip_path("", "Text/ch1.html#p") == "Text/ch1.html#p"

    def test_absolute_href_replaces_base(self) -> None:
        assert resolve_zip_path("OEBPS/text", "/images/a.png") == "images/a.png"

    def test_backslashes_in_href(self) -> None:
        assert resolve_zip_path("OEBPS", "Text\\ch1.html") == "OEBPS/Text/ch1.html"

    def test_only_first_hash_splits_fragment(self) -> None:
        assert resolve_zip_path("a", "b.xhtml#x#y") == "a/b.xhtml#x#y"


class TestHelpers:
    def test_split_fragment(self) -> None:
        assert split_fragment("c1.xhtml#s2") == ("c1.xhtml", "s2")
        assert split_fragment("c1.xhtml") == ("c1.xhtml", None)

    def test_parent_dir(self) -> None:
        assert parent_dir("OEBPS/text/c1.xhtml") == "OEBPS/text"
        assert parent_dir("content.opf") == ""
