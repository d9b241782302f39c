"""Standalone references page rendering pipeline."""

from __future__ import annotations

from ._constants import REFERENCES_FILENAME
from .page_builder import NavLink, PageBuilder


class ReferencesPageBuilder(PageBuilder):
    """Render ``references.html`` listing each professional reference."""

    template_name = "references_page.jinja"
    filename = REFERENCES_FILENAME

    def nav_links(self) -> list[NavLink]:
        """Return links back into the home page with References marked current."""
        return [
            NavLink("About", "index.html#about"),
            NavLink("Projects", "index.html#projects"),
            NavLink("Resume", "index.html#timeline"),
            NavLink("References", REFERENCES_FILENAME, current=True),
            NavLink("Contact", "index.html#contact"),
        ]


__all__ = ["ReferencesPageBuilder"]
