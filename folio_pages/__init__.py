"""Render a portfolio document into static Tailwind-styled HTML pages.

This package exposes the CLI entry point behind the ``folio-pages`` console
script, which writes ``index.html`` and, when the document calls for them,
``references.html`` and ``projects.html``.

Exports
-------
- ``app``: Cyclopts application handling the command line.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main(["portfolio.json"])  # doctest: +SKIP
wrote index.html
>>> from cyclopts import App
>>> from folio_pages import app
>>> isinstance(app, App)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
