"""Assemble every page a portfolio document calls for.

>>> from pathlib import Path
>>> from folio_pages.document import build_document
>>> from folio_pages.site import select_builders
>>> [type(b).__name__ for b in select_builders(build_document({}))]
['HomePageBuilder']
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from .homepage import HomePageBuilder
from .projects_page import ProjectsPageBuilder
from .references_page import ReferencesPageBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .document import PortfolioDocument
    from .page_builder import PageBuilder


def select_builders(
    document: PortfolioDocument, *, templates_dir: Path | None = None
) -> list[PageBuilder]:
    """Return builders for the home page and any conditional pages."""
    builders: list[PageBuilder] = [
        HomePageBuilder(document, templates_dir=templates_dir)
    ]
    if document.has_references_page:
        builders.append(ReferencesPageBuilder(document, templates_dir=templates_dir))
    if document.has_projects_page:
        builders.append(ProjectsPageBuilder(document, templates_dir=templates_dir))
    return builders


def build_site(
    document: PortfolioDocument,
    output_dir: Path,
    *,
    generated_at: dt.datetime | None = None,
    templates_dir: Path | None = None,
) -> list[Path]:
    """Render and write every page for ``document``.

    Parameters
    ----------
    document : PortfolioDocument
        Parsed portfolio document.
    output_dir : Path
        Directory receiving ``index.html`` and the conditional pages.
    generated_at : datetime, optional
        Timestamp shared by every page; defaults to now (UTC).
    templates_dir : Path, optional
        Override for the Jinja templates directory.

    Returns
    -------
    list[Path]
        Written paths: ``index.html`` first, then ``references.html`` and
        ``projects.html`` when generated.

    Raises
    ------
    OSError
        If a page cannot be written. Remaining pages are not attempted.

    Notes
    -----
    All pages are rendered before the first write, so a rendering failure
    leaves the output directory untouched.
    """
    timestamp = generated_at or dt.datetime.now(dt.UTC)
    rendered = [
        (builder, builder.render(timestamp))
        for builder in select_builders(document, templates_dir=templates_dir)
    ]
    return [builder.write(html, output_dir) for builder, html in rendered]


__all__ = ["build_site", "select_builders"]
