"""Error taxonomy raised while building the recipe site.

Every failure that aborts a build derives from :class:`BuildError` so the CLI
can report it with a single handler. Missing optional assets never raise;
they are reported as warnings by :mod:`bps_pages.assets`.
"""

from __future__ import annotations


class BuildError(RuntimeError):
    """Base class for fatal site build failures."""


class NotFoundError(BuildError):
    """Raised when a required input directory is missing or unreadable."""


class ParseError(BuildError):
    """Raised when a record file is not a valid structured record."""


class TemplateError(BuildError):
    """Raised when a template cannot be loaded, compiled, or rendered."""


class WriteError(BuildError):
    """Raised when the output tree cannot be cleared, written, or copied into."""


__all__ = [
    "BuildError",
    "NotFoundError",
    "ParseError",
    "TemplateError",
    "WriteError",
]
