"""Typed dataclasses describing a portfolio document."""

from __future__ import annotations

import dataclasses as dc

from folio_pages._constants import DEFAULT_SECTION_ORDER


class DocumentError(ValueError):
    """Raised when the portfolio document cannot be parsed or is malformed."""


@dc.dataclass(slots=True)
class ThemeColors:
    """Colour overrides supplied by the document; ``None`` means unset."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    background: str | None = None
    text: str | None = None


@dc.dataclass(slots=True)
class SkillCategory:
    """Named group of skills shown as a single card."""

    id: str
    name: str
    icon: str | None = None


@dc.dataclass(slots=True)
class SkillsData:
    """Skill categories alongside the labels filed under each category id."""

    categories: list[SkillCategory] = dc.field(default_factory=list)
    skills: dict[str, list[str]] = dc.field(default_factory=dict)

    def skills_for(self, category: SkillCategory) -> list[str]:
        """Return the labels filed under ``category``, or an empty list."""
        return self.skills.get(category.id, [])


@dc.dataclass(slots=True)
class Project:
    """Portfolio project card content."""

    title: str | None = None
    summary: str | None = None
    description: str | None = None
    image: str | None = None
    image_bg: str | None = None
    image_style: str | None = None
    skills: list[str] = dc.field(default_factory=list)
    technologies: list[str] = dc.field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None

    @property
    def blurb(self) -> str:
        """Return the summary, falling back to the long description."""
        return self.summary or self.description or ""


@dc.dataclass(slots=True)
class TimelineEntry:
    """Education, experience, or research milestone."""

    type: str | None = None
    year: str | None = None
    title: str | None = None
    organization: str | None = None
    description: str | None = None


@dc.dataclass(slots=True)
class Reference:
    """Professional reference listed on the references page."""

    name: str | None = None
    title: str | None = None
    company: str | None = None
    relationship: str | None = None
    description: str | None = None
    testimonial: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None

    @property
    def initials(self) -> str:
        """Return the first letter of each whitespace-separated name part."""
        return "".join(part[0] for part in (self.name or "").split())

    @property
    def statement(self) -> str:
        """Return the description, falling back to the testimonial."""
        return self.description or self.testimonial or ""


@dc.dataclass(slots=True)
class ContactInfo:
    """Direct contact methods and interests."""

    email: str | None = None
    linkedin: str | None = None
    phone: str | None = None
    areas_of_interest: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class LinksInfo:
    """External profile links."""

    github: str | None = None


@dc.dataclass(slots=True)
class PortfolioDocument:
    """Root portfolio entity consumed by every renderer."""

    name: str | None = None
    title: str | None = None
    bio: str | None = None
    theme_colors: ThemeColors = dc.field(default_factory=ThemeColors)
    section_order: list[str] = dc.field(
        default_factory=lambda: list(DEFAULT_SECTION_ORDER)
    )
    about_text: str | None = None
    skills: SkillsData | None = None
    skills_display_mode: str = "card"
    projects: list[Project] = dc.field(default_factory=list)
    timeline: list[TimelineEntry] = dc.field(default_factory=list)
    contact: ContactInfo | None = None
    links: LinksInfo | None = None
    resume_url: str | None = None
    references_url: str | None = None
    references: list[Reference] = dc.field(default_factory=list)
    footer_descriptors: list[str] = dc.field(default_factory=list)
    projects_description: str | None = None
    contact_intro: str | None = None
    headshot_image: str | None = None

    @property
    def has_references_page(self) -> bool:
        """Return whether a standalone references page should be generated."""
        return bool(self.references_url and self.references_url.strip()) or bool(
            self.references
        )

    @property
    def has_projects_page(self) -> bool:
        """Return whether a standalone projects page should be generated."""
        return bool(self.projects)


__all__ = [
    "ContactInfo",
    "DocumentError",
    "LinksInfo",
    "PortfolioDocument",
    "Project",
    "Reference",
    "SkillCategory",
    "SkillsData",
    "ThemeColors",
    "TimelineEntry",
]
