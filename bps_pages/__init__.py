"""Static site generator for the Bread Poets' Society recipe pages.

This package exposes the CLI entry points used by ``uv run bps-pages`` to
render one HTML page per recipe record, the ``index.html`` listing page, and
the static assets that accompany them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that runs the app and returns an exit code.

Examples
--------
>>> from bps_pages import main
>>> main(["build"])  # doctest: +SKIP
0
>>> from bps_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
