"""
Placeholder value resolution.
"""

from __future__ import annotations

from .types import RunOptions


class PlaceholderResolver:
    """
    Picks the substitution value for a placeholder name.

    Precedence:
    1. explicit value from -p (an empty value counts)
    2. the -r fallback, when it is a non-empty string
    3. the original token, braces included
    """

    def __init__(self, options: RunOptions):
        self._placeholders = options.placeholders
        self._default = options.default_replacement or ""

    def resolve(self, name: str) -> str:
        if name in self._placeholders:
            return self._placeholders[name]
        if self._default:
            return self._default
        return "{" + name + "}"

    __call__ = resolve


__all__ = ["PlaceholderResolver"]
