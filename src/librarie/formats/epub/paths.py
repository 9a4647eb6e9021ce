# ABOUTME: Pure path algebra for archive-internal EPUB paths.
# ABOUTME: Joins manifest hrefs to the package directory and resolves links found inside resources.

import posixpath


def split_fragment(href: str) -> tuple[str, str | None]:
    """Split "chap1.xhtml#s2" into ("chap1.xhtml", "s2")."""
    if "#" not in href:
        return href, None
    path, fragment = href.split("#", 1)
    return path, fragment


def parent_dir(zip_path: str) -> str:
    """Directory portion of an archive path, or "" for entries at the archive root."""
    if "/" not in zip_path:
        return ""
    return zip_path.rsplit("/", 1)[0]


def build_zip_path(package_dir: str | None, href: str) -> str:
    """Join a manifest href onto the package document's directory.

    Manifest hrefs are always relative to the package document, so this is
    a plain concatenation: no `..` resolution happens here.

    Args:
        package_dir: Directory of the package document ("" for the archive root).
        href: Href exactly as written in the manifest.

    Returns:
        The archive-internal path of the referenced entry.
    """
    normalized = href.replace("\\", "/")
    if not package_dir or not package_dir.strip() or package_dir == "/":
        return normalized.lstrip("/")
    prefix = package_dir if package_dir.endswith("/") else package_dir + "/"
    return (prefix + normalized).lstrip("/")


def resolve_zip_path(base_dir: str | None, href: str) -> str:
    """Resolve a link found inside an archive resource against its directory.

    Handles `.` and `..` segments and keeps any `#fragment` intact, so
    `resolve_zip_path("OEBPS/nav", "../text/c1.xhtml#s2")` gives
    `OEBPS/text/c1.xhtml#s2`. An absolute href replaces the base directory.

    Args:
        base_dir: Directory of the resource that contains the link.
        href: The link target as written in the resource.

    Returns:
        The archive-internal path, with the fragment reattached if present.
    """
    target, fragment = split_fragment(href)
    target = target.replace("\\", "/")
    base = (base_dir or "").replace("\\", "/")
    resolved = posixpath.normpath(posixpath.join(base, target))
    if resolved == ".":
        resolved = ""
    resolved = resolved.lstrip("/")
    return f"{resolved}#{fragment}" if fragment is not None else resolved
