"""
Protocol of the XML tree queries used by the extractor.

Lets the extractor run against any tree implementation, including
in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class XmlTreeProtocol(Protocol):
    """
    Read-only query interface over a loaded document.

    Expressions have the form "//element/@attribute".
    """

    def find_one(self, expr: str) -> Optional[Any]:
        """
        Returns the first node matching the expression in document order,
        or None when there is no match.
        """
        ...

    def find_all(self, expr: str) -> List[Any]:
        """Returns all nodes matching the expression, in document order."""
        ...

    def inner_text(self, node: Any) -> str:
        """Returns the text content of a node returned by a find_* call."""
        ...


__all__ = ["XmlTreeProtocol"]
