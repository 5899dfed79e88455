"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from WadlUserError.
The CLI prints them as a single "Error! <message>" line.

Programming errors and bugs should NOT inherit from WadlUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class WadlUserError(Exception):
    """
    Base class for all user-facing errors in WADL Dumper.
    Every one of them is fatal for the run.
    """
    pass


class MissingInputError(WadlUserError):
    def __init__(self) -> None:
        super().__init__("Flag -i is required, use -h flag for help.")


class SourceOpenError(WadlUserError):
    """Local input file cannot be opened."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Can't open '{source}' file.")


class DocumentLoadError(WadlUserError):
    """
    Document failed to load or parse.

    Remote fetch failures and local syntax errors end up here alike;
    the original cause is available through __cause__.
    """

    def __init__(self) -> None:
        super().__init__("Can't parse WADL file.")


class NotWadlError(WadlUserError):
    def __init__(self) -> None:
        super().__init__("Not a WADL file.")


__all__ = [
    "WadlUserError",
    "MissingInputError",
    "SourceOpenError",
    "DocumentLoadError",
    "NotWadlError",
]
