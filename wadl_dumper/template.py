"""
Rendering of {name} placeholders in resource paths.
"""

from __future__ import annotations

import re
from typing import Callable

# Brace-delimited token with a non-empty, non-nested name
PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


def render_path(path: str, resolve: Callable[[str], str]) -> str:
    """
    Replaces every {name} token in the path with resolve(name).

    Matches are found against the original string, so a substituted value
    is never scanned again. Paths without tokens are returned unchanged.

    Args:
        path: Path template, e.g. "/users/{id}"
        resolve: Name -> value callback (see PlaceholderResolver)

    Returns:
        Rendered path
    """
    return PLACEHOLDER_RE.sub(lambda m: resolve(m.group(1)), path)


__all__ = ["PLACEHOLDER_RE", "render_path"]
