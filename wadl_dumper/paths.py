"""
Joining of the base URL with resource paths.
"""

from __future__ import annotations

SEPARATOR = "/"
DOUBLE_SEPARATOR = "//"


def replace_nth(s: str, old: str, new: str, n: int) -> str:
    """
    Replaces only the n-th (1-based) occurrence of `old` in `s`.

    Occurrences are counted left to right; the search for the next one
    resumes right after the previous match. If there are fewer than n
    occurrences the string is returned unchanged.
    """
    if not old or n < 1:
        return s

    i = 0
    for m in range(1, n + 1):
        x = s.find(old, i)
        if x < 0:
            break
        if m == n:
            return s[:x] + new + s[x + len(old):]
        i = x + len(old)

    return s


def compose_path(base_url: str, path: str) -> str:
    """
    Prefixes the path with the base URL.

    With a base URL the second "//" is collapsed to "/": the first one
    belongs to the scheme, the second one comes from a base ending with "/"
    joined to a path starting with "/". Without a base the path is
    returned as is.
    """
    joined = base_url + path
    if base_url:
        joined = replace_nth(joined, DOUBLE_SEPARATOR, SEPARATOR, 2)
    return joined


__all__ = ["replace_nth", "compose_path"]
