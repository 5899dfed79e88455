from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


# -----------------------------
@dataclass(frozen=True)
class RunOptions:
    """
    Settings of a single run.

    Built once from the command line and passed explicitly to the extractor;
    nothing mutates it afterwards.
    """
    input_source: str
    show_base: bool = False
    # Fallback value for placeholders without an explicit mapping
    default_replacement: Optional[str] = None
    # placeholder name -> value
    placeholders: Mapping[str, str] = field(default_factory=dict)
    # HTTP fetch timeout, seconds
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not isinstance(self.placeholders, MappingProxyType):
            object.__setattr__(self, "placeholders", MappingProxyType(dict(self.placeholders)))


def parse_placeholders(args: Iterable[str] | None) -> Dict[str, str]:
    """
    Parses 'name=value' strings into a mapping.

    The first '=' splits the name from the value, so values may contain '='.
    Entries without '=' are dropped. A repeated name keeps its last value.
    """
    result: Dict[str, str] = {}
    if not args:
        return result

    for arg in args:
        if "=" not in arg:
            logger.debug("Ignoring malformed placeholder argument %r", arg)
            continue
        name, value = arg.split("=", 1)
        result[name] = value

    return result


__all__ = ["RunOptions", "parse_placeholders"]
