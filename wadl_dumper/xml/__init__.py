from __future__ import annotations

from .protocols import XmlTreeProtocol
from .tree import AttributeNode, LxmlTree, load_document

__all__ = ["XmlTreeProtocol", "AttributeNode", "LxmlTree", "load_document"]
