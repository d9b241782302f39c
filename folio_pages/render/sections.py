"""Fragment renderers for the sections of the portfolio home page.

Each ``render_*`` function is pure: it takes the document and the resolved
theme, consults only the slice of the document its section needs, and returns an
HTML fragment as a string. A renderer whose prerequisite data is missing returns
``""`` so callers can concatenate fragments without extra checks. An optional
``env`` keyword selects the Jinja environment; page builders pass their own so
fragments come from the same template tree as the page. The small
helpers alongside them (row chunking, timeline titles, handle stripping) carry
the derived values the templates display and are tested directly.

Examples
--------
>>> from folio_pages.render.sections import chunk_rows, timeline_title
>>> [row.items for row in chunk_rows(["a", "b", "c", "d"])]
[['a', 'b', 'c'], ['d']]
>>> timeline_title(["research", "education"])
'Education & Research'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from markupsafe import Markup

from folio_pages._constants import (
    CAROUSEL_REPEAT,
    PROJECT_SKILL_PREVIEW,
    ROW_SIZE,
    TIMELINE_FALLBACK_TITLE,
    TIMELINE_TYPE_ORDER,
)

from .environment import render_template
from .icons import resolve_icon

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from folio_pages.document import (
        PortfolioDocument,
        Project,
        SkillCategory,
        SkillsData,
        TimelineEntry,
    )

    from .theme import ResolvedTheme

T = typ.TypeVar("T")

RESEARCH_BADGE_COLOR = "#8b5cf6"
EXPERIENCE_BADGE_COLOR = "#0ea5e9"
TIMELINE_TYPE_LABELS = {
    "education": "Education",
    "experience": "Experience",
    "research": "Research",
}


@dc.dataclass(slots=True)
class CardRow:
    """A row of at most three cards; short rows are centred rather than gridded."""

    items: list[typ.Any]
    partial: bool


@dc.dataclass(slots=True)
class SkillCard:
    """A skill category paired with its labels and resolved icon."""

    category: SkillCategory
    skills: list[str]
    icon: Markup


@dc.dataclass(slots=True)
class ProjectCard:
    """A project with its visible skill tags and overflow count."""

    project: Project
    image_bg_class: str
    image_fit: str
    visible_skills: list[str]
    hidden_skill_count: int


@dc.dataclass(slots=True)
class TimelineCard:
    """A timeline entry placed on one side of the centre line."""

    entry: TimelineEntry
    left: bool
    badge_color: str
    badge_label: str


def chunk_rows(items: cabc.Sequence[T], size: int = ROW_SIZE) -> list[CardRow]:
    """Group ``items`` into rows of ``size``, flagging short rows as partial."""
    rows: list[CardRow] = []
    for start in range(0, len(items), size):
        chunk = list(items[start : start + size])
        rows.append(CardRow(items=chunk, partial=len(chunk) < size))
    return rows


def paragraphs(text: str) -> list[str]:
    """Split ``text`` on blank lines into paragraphs."""
    return text.split("\n\n")


def has_skills(skills: SkillsData | None) -> bool:
    """Return whether the document carries any skills data worth a sub-section."""
    if skills is None:
        return False
    return bool(skills.categories) or bool(skills.skills)


def categories_with_skills(skills: SkillsData) -> list[SkillCategory]:
    """Return categories that have at least one skill, in declared order."""
    return [category for category in skills.categories if skills.skills_for(category)]


def flatten_skills(skills: SkillsData) -> list[str]:
    """Flatten every skill label, category by category.

    Categories contribute in declared order; skill lists whose key matches no
    category follow in mapping order.
    """
    flattened: list[str] = []
    seen: set[str] = set()
    for category in skills.categories:
        if category.id in seen:
            continue
        seen.add(category.id)
        flattened.extend(skills.skills_for(category))
    for key, labels in skills.skills.items():
        if key not in seen:
            flattened.extend(labels)
    return flattened


def timeline_title(types: cabc.Iterable[str | None]) -> str:
    """Derive the timeline heading from the entry types present.

    Known types are listed in education, experience, research order regardless
    of input order, joined as ``A``, ``A & B`` or ``A, B, & C``.
    """
    present = {kind for kind in types if kind}
    if not present:
        return TIMELINE_FALLBACK_TITLE
    names = [TIMELINE_TYPE_LABELS[kind] for kind in TIMELINE_TYPE_ORDER if kind in present]
    match names:
        case []:
            # Only unrecognised types: keep the generic heading.
            return TIMELINE_FALLBACK_TITLE
        case [only]:
            return only
        case [first, second]:
            return f"{first} & {second}"
        case [*leading, last]:
            return f"{', '.join(leading)}, & {last}"


def timeline_badge_color(kind: str | None, theme: ResolvedTheme) -> str:
    """Return the badge colour for a timeline entry type."""
    match kind:
        case "education":
            return theme.primary
        case "research":
            return RESEARCH_BADGE_COLOR
        case _:
            return EXPERIENCE_BADGE_COLOR


def timeline_badge_label(kind: str | None) -> str:
    """Return the badge text; unknown types read as experience."""
    match kind:
        case "education" | "research":
            return TIMELINE_TYPE_LABELS[kind]
        case _:
            return TIMELINE_TYPE_LABELS["experience"]


def linkedin_handle(url: str) -> str:
    """Strip the scheme and ``linkedin.com/in/`` prefix for display."""
    return url.replace("https://", "", 1).replace("linkedin.com/in/", "", 1)


def github_handle(url: str) -> str:
    """Strip the scheme and ``github.com/`` prefix for display."""
    return (
        url.replace("https://", "", 1)
        .replace("http://", "", 1)
        .replace("github.com/", "", 1)
    )


def footer_text(document: PortfolioDocument) -> str:
    """Join the trimmed footer descriptors with pipes, else use the title."""
    if document.footer_descriptors:
        trimmed = (descriptor.strip() for descriptor in document.footer_descriptors)
        return " | ".join(descriptor for descriptor in trimmed if descriptor)
    return document.title or ""


def render_hero(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render the hero banner with headshot (or placeholder) and intro copy."""
    return render_template(
        "sections/hero.jinja", env=env, document=document, theme=theme
    )


def render_about(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render the about section, embedding the skills sub-section."""
    if "about" not in document.section_order:
        return ""
    about_text = document.about_text or (
        "Add your about text here to tell your story and showcase your personality."
    )
    return render_template(
        "sections/about.jinja",
        env=env,
        document=document,
        theme=theme,
        paragraphs=paragraphs(about_text),
        skills_html=Markup(render_skills(document, theme, env=env)),
    )


def render_skills(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render skills in the document's display mode, or ``""`` without skills."""
    if not has_skills(document.skills):
        return ""
    if document.skills_display_mode == "rotating":
        return render_skills_carousel(document, theme, env=env)
    return render_skills_cards(document, theme, env=env)


def render_skills_cards(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render one card per non-empty category, three to a row."""
    skills = document.skills
    if skills is None:
        return ""
    cards = [
        SkillCard(
            category=category,
            skills=skills.skills_for(category),
            icon=resolve_icon(category.icon, category.name, index),
        )
        for index, category in enumerate(categories_with_skills(skills))
    ]
    return render_template(
        "sections/skills_cards.jinja",
        env=env,
        theme=theme,
        rows=chunk_rows(cards),
    )


def render_skills_carousel(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render every skill as a badge in a looping marquee."""
    if document.skills is None:
        return ""
    labels = flatten_skills(document.skills)
    if not labels:
        return ""
    return render_template(
        "sections/skills_carousel.jinja",
        env=env,
        theme=theme,
        skills=labels * CAROUSEL_REPEAT,
    )


def _project_card(project: Project) -> ProjectCard:
    match project.image_bg:
        case "white":
            image_bg_class = "bg-white"
        case "black":
            image_bg_class = "bg-black"
        case _:
            image_bg_class = "bg-gray-100"
    return ProjectCard(
        project=project,
        image_bg_class=image_bg_class,
        image_fit=project.image_style or "cover",
        visible_skills=project.skills[:PROJECT_SKILL_PREVIEW],
        hidden_skill_count=max(len(project.skills) - PROJECT_SKILL_PREVIEW, 0),
    )


def render_projects(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render featured project cards, three to a row."""
    if "projects" not in document.section_order or not document.projects:
        return ""
    cards = [_project_card(project) for project in document.projects]
    return render_template(
        "sections/projects.jinja",
        env=env,
        document=document,
        theme=theme,
        rows=chunk_rows(cards),
    )


def render_timeline(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render the resume downloads and the alternating timeline."""
    if "timeline" not in document.section_order or not document.timeline:
        return ""
    cards = [
        TimelineCard(
            entry=entry,
            left=index % 2 == 0,
            badge_color=timeline_badge_color(entry.type, theme),
            badge_label=timeline_badge_label(entry.type),
        )
        for index, entry in enumerate(document.timeline)
    ]
    return render_template(
        "sections/timeline.jinja",
        env=env,
        document=document,
        theme=theme,
        title=timeline_title(entry.type for entry in document.timeline),
        cards=cards,
    )


def render_contact(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    env: Environment | None = None,
) -> str:
    """Render the contact methods present in the document."""
    if "contact" not in document.section_order:
        return ""
    contact = document.contact
    github = document.links.github if document.links else None
    return render_template(
        "sections/contact.jinja",
        env=env,
        document=document,
        theme=theme,
        contact=contact,
        linkedin_display=linkedin_handle(contact.linkedin)
        if contact and contact.linkedin
        else "",
        github=github,
        github_display=github_handle(github) if github else "",
    )


def render_footer(
    document: PortfolioDocument,
    theme: ResolvedTheme,
    *,
    generated_at: dt.datetime | None = None,
    env: Environment | None = None,
) -> str:
    """Render the home page footer with descriptors and social icons."""
    year = (generated_at or dt.datetime.now(dt.UTC)).year
    return render_template(
        "sections/footer.jinja",
        env=env,
        document=document,
        theme=theme,
        descriptor_text=footer_text(document),
        github=document.links.github if document.links else None,
        year=year,
    )


__all__ = [
    "CardRow",
    "ProjectCard",
    "SkillCard",
    "TimelineCard",
    "categories_with_skills",
    "chunk_rows",
    "flatten_skills",
    "footer_text",
    "github_handle",
    "has_skills",
    "linkedin_handle",
    "paragraphs",
    "render_about",
    "render_contact",
    "render_footer",
    "render_hero",
    "render_projects",
    "render_skills",
    "render_skills_cards",
    "render_skills_carousel",
    "render_timeline",
    "timeline_badge_color",
    "timeline_badge_label",
    "timeline_title",
]
