"""Portfolio home page rendering pipeline.

This module turns a :class:`~folio_pages.document.PortfolioDocument` into the
``index.html`` artefact. Sections are rendered in the document's
``sectionOrder`` by :func:`~folio_pages.render.render_sections`, wrapped in the
shared page chrome, and followed by the footer.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from folio_pages.document import load_document
>>> builder = HomePageBuilder(load_document(Path("portfolio.json")))  # doctest: +SKIP
>>> builder.run(Path.cwd())  # doctest: +SKIP
PosixPath('.../index.html')
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from ._constants import INDEX_FILENAME, REFERENCES_FILENAME
from .page_builder import NavLink, PageBuilder
from .render import render_footer, render_sections

if typ.TYPE_CHECKING:
    import datetime as dt


class HomePageBuilder(PageBuilder):
    """Render the main portfolio page."""

    template_name = "home_page.jinja"
    filename = INDEX_FILENAME

    def nav_links(self) -> list[NavLink]:
        """Return in-page anchors, adding the references page when generated."""
        links = [
            NavLink("About", "#about"),
            NavLink("Projects", "#projects"),
            NavLink("Resume", "#timeline"),
        ]
        if self.document.has_references_page:
            links.append(NavLink("References", REFERENCES_FILENAME))
        links.append(NavLink("Contact", "#contact"))
        return links

    def extra_context(self, generated_at: dt.datetime) -> dict[str, object]:
        """Render the ordered sections and the footer as trusted fragments."""
        return {
            "sections": Markup(
                render_sections(self.document, self.theme, env=self.env)
            ),
            "footer": Markup(
                render_footer(
                    self.document,
                    self.theme,
                    generated_at=generated_at,
                    env=self.env,
                )
            ),
        }


__all__ = ["HomePageBuilder"]
