"""Pure renderers that turn a portfolio document into HTML fragments."""

from .environment import get_environment, render_template
from .escaping import escape_html
from .icons import resolve_icon
from .ordering import render_section, render_sections, resolve_section_order
from .sections import (
    render_about,
    render_contact,
    render_footer,
    render_hero,
    render_projects,
    render_skills,
    render_skills_cards,
    render_skills_carousel,
    render_timeline,
)
from .theme import DEFAULT_THEME, ResolvedTheme, resolve_theme

__all__ = [
    "DEFAULT_THEME",
    "ResolvedTheme",
    "escape_html",
    "get_environment",
    "render_about",
    "render_contact",
    "render_footer",
    "render_hero",
    "render_projects",
    "render_section",
    "render_sections",
    "render_skills",
    "render_skills_cards",
    "render_skills_carousel",
    "render_template",
    "render_timeline",
    "resolve_icon",
    "resolve_section_order",
    "resolve_theme",
]
