"""Markdown post-processing and pagination helpers for the folio site.

This package prepares markdown articles for publishing (heading anchors,
table of contents, link rewriting) and computes listing pagination. The
``folio`` console script wraps these helpers.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
