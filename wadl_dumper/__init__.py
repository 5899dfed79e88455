"""
WADL Dumper: lists resource paths declared in a WADL document.
"""

from __future__ import annotations

from .errors import WadlUserError
from .extractor import WadlExtractor, dump
from .types import RunOptions, parse_placeholders

__all__ = ["WadlUserError", "WadlExtractor", "dump", "RunOptions", "parse_placeholders"]
