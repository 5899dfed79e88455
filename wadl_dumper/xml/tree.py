"""
lxml-backed document tree and document loading.

Remote sources are fetched with httpx, local ones are read from disk.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import IO, List, Optional

import httpx
from lxml import etree

from ..errors import DocumentLoadError, SourceOpenError

logger = logging.getLogger(__name__)

# "//element/@attribute"
_EXPR_RE = re.compile(r"^//(?P<element>[A-Za-z_][\w.-]*)/@(?P<attr>[A-Za-z_][\w.-]*)$")

_XMLNS = "xmlns"


@dataclass(frozen=True)
class AttributeNode:
    """Attribute value found on an element."""
    element: str
    name: str
    value: str


def _make_parser() -> etree.XMLParser:
    # Input is untrusted: no external entities, no network lookups
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


class LxmlTree:
    """
    Query adapter over an lxml document.

    Elements are matched by local name, so "//resource/@path" finds
    <resource> both with and without a namespace. The "xmlns" attribute
    reads the default namespace declared on the element itself.
    """

    def __init__(self, root: etree._Element):
        self._root = root

    @classmethod
    def from_bytes(cls, data: bytes) -> "LxmlTree":
        try:
            root = etree.fromstring(data, parser=_make_parser())
        except etree.ParseError as e:
            raise DocumentLoadError() from e
        return cls(root)

    @classmethod
    def from_stream(cls, stream: IO[bytes]) -> "LxmlTree":
        try:
            doc = etree.parse(stream, parser=_make_parser())
        except etree.ParseError as e:
            raise DocumentLoadError() from e
        return cls(doc.getroot())

    # ---- XmlTreeProtocol ----

    def find_one(self, expr: str) -> Optional[AttributeNode]:
        for node in self._iter_nodes(expr):
            return node
        return None

    def find_all(self, expr: str) -> List[AttributeNode]:
        return list(self._iter_nodes(expr))

    def inner_text(self, node: AttributeNode) -> str:
        return node.value

    # ---- internals ----

    def _iter_nodes(self, expr: str):
        m = _EXPR_RE.match(expr)
        if not m:
            raise ValueError(f"Unsupported query expression: {expr!r}")
        element, attr = m.group("element"), m.group("attr")

        # iter() walks the tree in document order, root included
        for el in self._root.iter(etree.Element):
            if etree.QName(el).localname != element:
                continue
            value = self._attribute(el, attr)
            if value is not None:
                yield AttributeNode(element=element, name=attr, value=value)

    @staticmethod
    def _attribute(el: etree._Element, attr: str) -> Optional[str]:
        if attr == _XMLNS:
            parent = el.getparent()
            inherited = parent.nsmap.get(None) if parent is not None else None
            declared = el.nsmap.get(None)
            return declared if declared is not None and declared != inherited else None
        return el.get(attr)


def load_document(source: str, *, timeout: float = 30.0, client: Optional[httpx.Client] = None) -> LxmlTree:
    """
    Loads a document from a URL or a local file.

    Sources starting with "http" are fetched over the network, anything
    else is treated as a filesystem path.

    Args:
        source: URL or file path
        timeout: HTTP timeout in seconds
        client: Optional preconfigured httpx client

    Raises:
        SourceOpenError: Local file cannot be opened
        DocumentLoadError: Fetch failed or the document does not parse
    """
    if source.startswith("http"):
        return _load_url(source, timeout=timeout, client=client)

    logger.debug("Reading WADL from file %s", source)
    # A directory opens but never parses
    if os.path.isdir(source):
        raise DocumentLoadError()
    try:
        f = open(source, "rb")
    except OSError as e:
        raise SourceOpenError(source) from e
    with f:
        return LxmlTree.from_stream(f)


def _load_url(url: str, *, timeout: float, client: Optional[httpx.Client]) -> LxmlTree:
    logger.debug("Fetching WADL from %s", url)
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as c:
                response = c.get(url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Fetch failed: %s", e)
        raise DocumentLoadError() from e
    return LxmlTree.from_bytes(response.content)


__all__ = ["AttributeNode", "LxmlTree", "load_document"]
