"""Shared fixtures describing a representative portfolio document."""

from __future__ import annotations

import copy
import typing as typ

import pytest

from folio_pages.document import PortfolioDocument, build_document
from folio_pages.render import ResolvedTheme, resolve_theme

SAMPLE_PAYLOAD: dict[str, typ.Any] = {
    "name": "Ada Lovelace",
    "title": "Analytical Engineer",
    "bio": "I write programs for engines that do not exist yet.",
    "themeColors": {"primary": "#112233", "secondary": "#445566"},
    "sectionOrder": ["hero", "about", "skills", "projects", "timeline", "contact"],
    "aboutText": "First paragraph.\n\nSecond paragraph.",
    "skills": {
        "categories": [
            {"id": "lang", "name": "Languages", "icon": "language"},
            {"id": "empty", "name": "Nothing Here", "icon": "star"},
            {"id": "tools", "name": "Tooling", "icon": "tool"},
        ],
        "skills": {
            "lang": ["Python", "Rust"],
            "empty": [],
            "tools": ["Git"],
        },
    },
    "projects": [
        {
            "title": "Difference Engine",
            "summary": "Tabulates polynomials.",
            "description": "A long description.",
            "skills": ["Mechanics", "Maths", "Brass", "Steam", "Patience"],
            "technologies": ["Brass", "Steam"],
            "githubUrl": "https://github.com/ada/engine",
            "liveUrl": "https://engine.example",
        },
        {"title": "Notes", "description": "Translator's notes.", "imageBg": "black"},
    ],
    "timeline": [
        {
            "type": "research",
            "year": "1843",
            "title": "Notes on the Engine",
            "organization": "Scientific Memoirs",
        },
        {
            "type": "education",
            "year": "1830",
            "title": "Private tutoring",
            "organization": "Home",
            "description": "Mathematics with De Morgan.",
        },
    ],
    "contact": {
        "email": "ada@example.com",
        "linkedin": "https://linkedin.com/in/ada",
        "phone": "+44 20 0000 0000",
        "areasOfInterest": ["Computing", "Poetry"],
    },
    "links": {"github": "https://github.com/ada"},
    "resumeUrl": "https://example.com/resume.pdf",
    "references": [
        {
            "name": "Charles Babbage",
            "title": "Inventor",
            "company": "Cambridge",
            "testimonial": "Enchantress of numbers.",
            "email": "charles@example.com",
            "linkedin": "linkedin.com/in/babbage",
        }
    ],
    "footerDescriptors": [" Mathematician ", "", "Writer"],
}


@pytest.fixture
def sample_payload() -> dict[str, typ.Any]:
    """Return a deep copy of the representative portfolio payload."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def portfolio(sample_payload: dict[str, typ.Any]) -> PortfolioDocument:
    """Return the representative payload as a typed document."""
    return build_document(sample_payload)


@pytest.fixture
def theme(portfolio: PortfolioDocument) -> ResolvedTheme:
    """Return the resolved theme for the representative document."""
    return resolve_theme(portfolio.theme_colors)
