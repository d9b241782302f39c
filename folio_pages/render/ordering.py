"""Resolve the home page section order and concatenate section fragments."""

from __future__ import annotations

import typing as typ

from folio_pages._constants import DEFAULT_SECTION_ORDER

from .sections import (
    render_about,
    render_contact,
    render_hero,
    render_projects,
    render_timeline,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from folio_pages.document import PortfolioDocument

    from .theme import ResolvedTheme

    SectionRenderer = cabc.Callable[..., str]


def _skip(
    _document: PortfolioDocument,
    _theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    return ""


# ``skills`` renders inside ``about``; its own slot stays empty.
SECTION_RENDERERS: dict[str, SectionRenderer] = {
    "hero": render_hero,
    "about": render_about,
    "skills": _skip,
    "projects": render_projects,
    "timeline": render_timeline,
    "contact": render_contact,
}


def resolve_section_order(order: cabc.Sequence[str] | None) -> list[str]:
    """Return ``order`` unchanged, or the default order when it is absent.

    Examples
    --------
    >>> resolve_section_order(None)
    ['hero', 'about', 'skills', 'projects', 'timeline', 'contact']
    >>> resolve_section_order(["contact", "bogus", "hero"])
    ['contact', 'bogus', 'hero']
    """
    if order is None:
        return list(DEFAULT_SECTION_ORDER)
    return list(order)


def render_section(
    section_id: str,
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render one section by identifier; unknown identifiers yield ``""``."""
    renderer = SECTION_RENDERERS.get(section_id, _skip)
    return renderer(document, theme, env=env)


def render_sections(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render every section in the document's order, joined by newlines."""
    return "\n".join(
        render_section(section_id, document, theme, env=env)
        for section_id in resolve_section_order(document.section_order)
    )


__all__ = [
    "SECTION_RENDERERS",
    "render_section",
    "render_sections",
    "resolve_section_order",
]
