"""Static site generator for the Stylus by Example documentation.

This package exposes the CLI entry points used by ``uv run pages`` to render
the example pages, their navigation, and code panels.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sbe_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
