"""
Builders of WADL documents for tests.
"""

from __future__ import annotations

from typing import Optional

WADL_NS = "http://wadl.dev.java.net/2009/02"


def make_wadl(body: str, *, base: Optional[str] = "http://h.tld/", ns: Optional[str] = WADL_NS) -> str:
    """
    Wraps resource declarations into an <application><resources> document.

    Args:
        body: Inner XML of <resources>
        base: Value of resources/@base, None to omit it
        ns: Default namespace of <application>, None to omit it
    """
    xmlns = f' xmlns="{ns}"' if ns is not None else ""
    base_attr = f' base="{base}"' if base is not None else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<application{xmlns}>\n"
        f"  <resources{base_attr}>\n"
        f"{body}\n"
        "  </resources>\n"
        "</application>\n"
    )
