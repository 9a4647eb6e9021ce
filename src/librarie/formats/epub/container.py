# ABOUTME: Locates the package document through META-INF/container.xml.
# ABOUTME: Absence of a usable rootfile is reported as None, never raised.

import logging
import zipfile

from lxml import etree

from librarie.formats.epub import markup
from librarie.formats.epub.archive import read_member
from librarie.formats.epub.errors import CorruptContainerError

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"


def locate_package_document(archive: zipfile.ZipFile) -> str | None:
    """Find the archive path of the package document (OPF).

    Reads the first ``container/rootfiles/rootfile/@full-path``, matching
    element names without regard to namespace.

    Args:
        archive: An open EPUB archive.

    Returns:
        The package document path, or None if the container document is
        missing, damaged, unparsable or names no rootfile.
    """
    try:
        raw = read_member(archive, CONTAINER_PATH)
    except CorruptContainerError as exc:
        logger.debug("Unreadable %s: %s", CONTAINER_PATH, exc)
        return None
    if raw is None:
        logger.debug("No %s in %s", CONTAINER_PATH, archive.filename)
        return None
    try:
        root = markup.parse_xml(raw)
    except etree.XMLSyntaxError as exc:
        logger.debug("Unparsable %s in %s: %s", CONTAINER_PATH, archive.filename, exc)
        return None

    rootfiles = markup.path(root, "container", "rootfiles")
    rootfile = markup.child(rootfiles, "rootfile")
    if rootfile is None:
        return None
    full_path = rootfile.get("full-path")
    if not full_path or not full_path.strip():
        return None
    return full_path
