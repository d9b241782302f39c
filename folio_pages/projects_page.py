"""Standalone projects page rendering pipeline."""

from __future__ import annotations

from ._constants import PROJECTS_FILENAME, REFERENCES_FILENAME
from .page_builder import NavLink, PageBuilder


class ProjectsPageBuilder(PageBuilder):
    """Render ``projects.html`` with every project's links and technologies."""

    template_name = "projects_page.jinja"
    filename = PROJECTS_FILENAME

    def nav_links(self) -> list[NavLink]:
        """Return links back into the home page with Projects marked current."""
        links = [
            NavLink("About", "index.html#about"),
            NavLink("Projects", PROJECTS_FILENAME, current=True),
            NavLink("Resume", "index.html#timeline"),
        ]
        if self.document.has_references_page:
            links.append(NavLink("References", REFERENCES_FILENAME))
        links.append(NavLink("Contact", "index.html#contact"))
        return links


__all__ = ["ProjectsPageBuilder"]
