# ABOUTME: Namespace-agnostic XML helpers built on lxml.
# ABOUTME: EPUB2 and EPUB3 use different namespaces, so elements are matched by local name.

from lxml import etree


def parse_xml(raw: bytes) -> etree._Element:
    """Parse a document strictly, without entity expansion or network access.

    Raises:
        etree.XMLSyntaxError: If the document is not well-formed.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    return etree.fromstring(raw, parser=parser)


def local_name(tag: object) -> str:
    """Return the tag (or attribute) name with any {namespace} prefix removed."""
    if not tag or not isinstance(tag, str):
        return ""
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def children(node: etree._Element | None, name: str) -> list[etree._Element]:
    """Direct children of node whose local name is name, in document order."""
    if node is None:
        return []
    return [el for el in node if local_name(el.tag) == name]


def child(node: etree._Element | None, name: str) -> etree._Element | None:
    """First direct child of node with the given local name."""
    found = children(node, name)
    return found[0] if found else None


def descendants(node: etree._Element, name: str) -> list[etree._Element]:
    """All descendants of node with the given local name, in document order."""
    return [el for el in node.iterdescendants() if local_name(el.tag) == name]


def attr(node: etree._Element, name: str) -> str | None:
    """Read an attribute by local name, ignoring its namespace."""
    value = node.get(name)
    if value is None:
        for key, candidate in node.attrib.items():
            if local_name(key) == name:
                value = candidate
                break
    return value


def text(node: etree._Element | None) -> str | None:
    """Stripped text content of node, or None when empty."""
    if node is None:
        return None
    value = "".join(node.itertext()).strip()
    return value or None


def path(root: etree._Element, *names: str) -> etree._Element | None:
    """Walk from the root element through nested children by local name.

    The first name must match the root element itself, mirroring an
    absolute path such as /package/metadata.
    """
    if not names or local_name(root.tag) != names[0]:
        return None
    node: etree._Element | None = root
    for name in names[1:]:
        node = child(node, name)
        if node is None:
            return None
    return node
