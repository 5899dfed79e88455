"""
In-memory tree for extractor tests, no XML parser involved.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class FakeTree:
    """
    XmlTreeProtocol implementation backed by a dict: expression -> values.
    Nodes are the values themselves.
    """

    def __init__(self, nodes: Dict[str, List[str]]):
        self.nodes = nodes
        self.queries: List[str] = []

    def find_one(self, expr: str) -> Optional[str]:
        self.queries.append(expr)
        values = self.nodes.get(expr) or []
        return values[0] if values else None

    def find_all(self, expr: str) -> List[str]:
        self.queries.append(expr)
        return list(self.nodes.get(expr) or [])

    def inner_text(self, node: str) -> str:
        return node
