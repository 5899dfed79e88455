"""
WADL extractor.

Validates the document, picks the base URL and renders every
resource/@path declaration in document order.
"""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from .errors import NotWadlError
from .paths import compose_path
from .placeholders import PlaceholderResolver
from .template import render_path
from .types import RunOptions
from .xml.protocols import XmlTreeProtocol

logger = logging.getLogger(__name__)

WADL_NS_MARKER = "wadl.dev.java.net"

XMLNS_QUERY = "//application/@xmlns"
BASE_QUERY = "//resources/@base"
PATH_QUERY = "//resource/@path"


class WadlExtractor:
    """
    Renders the resource paths of one loaded document.

    Validation happens on construction, so a document that is not a WADL
    never produces any output.
    """

    def __init__(self, tree: XmlTreeProtocol, options: RunOptions):
        self.tree = tree
        self.options = options
        self._validate()
        self.base_url = self._compute_base_url()
        self._resolver = PlaceholderResolver(options)

    def _validate(self) -> None:
        xmlns = self.tree.find_one(XMLNS_QUERY)
        if xmlns is None or WADL_NS_MARKER not in self.tree.inner_text(xmlns):
            raise NotWadlError()

    def _compute_base_url(self) -> str:
        base = self.tree.find_one(BASE_QUERY)
        if base is not None and self.options.show_base:
            value = self.tree.inner_text(base)
            logger.debug("Using base URL %r", value)
            return value
        return ""

    def render(self, raw_path: str) -> str:
        """Composes one declaration with the base URL and fills its placeholders."""
        path = compose_path(self.base_url, raw_path)
        return render_path(path, self._resolver.resolve)

    def iter_paths(self) -> Iterator[str]:
        """Yields rendered paths in document order; duplicates are kept."""
        for node in self.tree.find_all(PATH_QUERY):
            yield self.render(self.tree.inner_text(node))


def dump(tree: XmlTreeProtocol, options: RunOptions, out: TextIO) -> int:
    """
    Writes one rendered path per line to `out`.

    Returns:
        Number of lines written

    Raises:
        NotWadlError: The document lacks the WADL namespace marker
    """
    extractor = WadlExtractor(tree, options)
    count = 0
    for path in extractor.iter_paths():
        out.write(path + "\n")
        count += 1
    logger.debug("Dumped %d path(s)", count)
    return count


__all__ = ["WADL_NS_MARKER", "WadlExtractor", "dump"]
