"""Builders that turn a parsed portfolio mapping into typed dataclasses."""

from __future__ import annotations

import typing as typ

from folio_pages._constants import DEFAULT_SECTION_ORDER

from .helpers import _mapping_entries, _optional_str, _string_list
from .models import (
    ContactInfo,
    DocumentError,
    LinksInfo,
    PortfolioDocument,
    Project,
    Reference,
    SkillCategory,
    SkillsData,
    ThemeColors,
    TimelineEntry,
)


def build_document(payload: typ.Mapping[str, typ.Any]) -> PortfolioDocument:
    """Build a :class:`PortfolioDocument` from a parsed mapping.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Decoded document using the camelCase keys of the input format.

    Returns
    -------
    PortfolioDocument
        Typed document with optional blocks set to ``None`` or empty lists
        when absent.

    Raises
    ------
    DocumentError
        If ``payload`` is not a mapping.
    """
    match payload:
        case dict() as data:
            pass
        case _:
            msg = "Portfolio document must be a mapping."
            raise DocumentError(msg)

    mode = _optional_str(data.get("skillsDisplayMode"))
    return PortfolioDocument(
        name=_optional_str(data.get("name")),
        title=_optional_str(data.get("title")),
        bio=_optional_str(data.get("bio")),
        theme_colors=_build_theme_colors(data.get("themeColors")),
        section_order=_build_section_order(data.get("sectionOrder")),
        about_text=_optional_str(data.get("aboutText")),
        skills=_build_skills(data.get("skills")),
        skills_display_mode="rotating" if mode == "rotating" else "card",
        projects=_build_projects(data.get("projects")),
        timeline=_build_timeline(data.get("timeline")),
        contact=_build_contact(data.get("contact")),
        links=_build_links(data.get("links")),
        resume_url=_optional_str(data.get("resumeUrl")),
        references_url=_optional_str(data.get("referencesUrl")),
        references=_build_references(data.get("references")),
        footer_descriptors=_string_list(data.get("footerDescriptors")),
        projects_description=_optional_str(data.get("projectsDescription")),
        contact_intro=_optional_str(data.get("contactIntro")),
        headshot_image=_optional_str(data.get("headshotImage")),
    )


def _build_theme_colors(payload: object | None) -> ThemeColors:
    """Build theme colour overrides; unset entries stay ``None``."""
    if not isinstance(payload, dict):
        return ThemeColors()
    return ThemeColors(
        primary=_optional_str(payload.get("primary")),
        secondary=_optional_str(payload.get("secondary")),
        accent=_optional_str(payload.get("accent")),
        background=_optional_str(payload.get("background")),
        text=_optional_str(payload.get("text")),
    )


def _build_section_order(payload: object | None) -> list[str]:
    """Return the caller's section order verbatim, or the default order."""
    match payload:
        case list() as items:
            return [str(item) for item in items]
        case _:
            return list(DEFAULT_SECTION_ORDER)


def _build_skills(payload: object | None) -> SkillsData | None:
    """Build the skills block from categories and the id-keyed label mapping."""
    if not isinstance(payload, dict):
        return None
    categories: list[SkillCategory] = []
    for entry in _mapping_entries(payload.get("categories")):
        match entry:
            case {"id": category_id, **rest}:
                pass
            case _:
                continue
        categories.append(
            SkillCategory(
                id=str(category_id),
                name=str(rest.get("name") or ""),
                icon=_optional_str(rest.get("icon")),
            )
        )
    skills: dict[str, list[str]] = {}
    raw_skills = payload.get("skills")
    if isinstance(raw_skills, dict):
        for key, labels in raw_skills.items():
            skills[str(key)] = _string_list(labels)
    return SkillsData(categories=categories, skills=skills)


def _build_projects(payload: object | None) -> list[Project]:
    """Build project cards in document order."""
    return [
        Project(
            title=_optional_str(entry.get("title")),
            summary=_optional_str(entry.get("summary")),
            description=_optional_str(entry.get("description")),
            image=_optional_str(entry.get("image")),
            image_bg=_optional_str(entry.get("imageBg")),
            image_style=_optional_str(entry.get("imageStyle")),
            skills=_string_list(entry.get("skills")),
            technologies=_string_list(entry.get("technologies")),
            github_url=_optional_str(entry.get("githubUrl")),
            live_url=_optional_str(entry.get("liveUrl")),
        )
        for entry in _mapping_entries(payload)
    ]


def _build_timeline(payload: object | None) -> list[TimelineEntry]:
    """Build timeline entries in document order."""
    return [
        TimelineEntry(
            type=_optional_str(entry.get("type")),
            year=_optional_str(entry.get("year")),
            title=_optional_str(entry.get("title")),
            organization=_optional_str(entry.get("organization")),
            description=_optional_str(entry.get("description")),
        )
        for entry in _mapping_entries(payload)
    ]


def _build_references(payload: object | None) -> list[Reference]:
    """Build professional references in document order."""
    return [
        Reference(
            name=_optional_str(entry.get("name")),
            title=_optional_str(entry.get("title")),
            company=_optional_str(entry.get("company")),
            relationship=_optional_str(entry.get("relationship")),
            description=_optional_str(entry.get("description")),
            testimonial=_optional_str(entry.get("testimonial")),
            email=_optional_str(entry.get("email")),
            phone=_optional_str(entry.get("phone")),
            linkedin=_optional_str(entry.get("linkedin")),
        )
        for entry in _mapping_entries(payload)
    ]


def _build_contact(payload: object | None) -> ContactInfo | None:
    """Build the contact block, or ``None`` when the document omits it."""
    if not isinstance(payload, dict):
        return None
    return ContactInfo(
        email=_optional_str(payload.get("email")),
        linkedin=_optional_str(payload.get("linkedin")),
        phone=_optional_str(payload.get("phone")),
        areas_of_interest=_string_list(payload.get("areasOfInterest")),
    )


def _build_links(payload: object | None) -> LinksInfo | None:
    """Build external profile links, or ``None`` when absent."""
    if not isinstance(payload, dict):
        return None
    return LinksInfo(github=_optional_str(payload.get("github")))


__all__ = ["build_document"]
