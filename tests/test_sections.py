"""Tests for the home page section fragment renderers.

Fragments are parsed with BeautifulSoup and inspected through the CSS hooks
each template exposes (``.skills-row``, ``.timeline-item`` and so on) rather
than by comparing raw markup.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

import pytest
from bs4 import BeautifulSoup

from folio_pages.document import (
    ContactInfo,
    PortfolioDocument,
    SkillCategory,
    SkillsData,
    build_document,
)
from folio_pages.render import (
    DEFAULT_THEME,
    render_about,
    render_contact,
    render_footer,
    render_hero,
    render_projects,
    render_skills,
    render_timeline,
)
from folio_pages.render.icons import FALLBACK_ROTATION, icon_svg
from folio_pages.render.sections import (
    chunk_rows,
    flatten_skills,
    footer_text,
    github_handle,
    linkedin_handle,
    timeline_badge_color,
    timeline_title,
)

if typ.TYPE_CHECKING:
    from folio_pages.render import ResolvedTheme


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _skills_document(count: int, *, mode: str = "card") -> PortfolioDocument:
    """Return a document with ``count`` single-skill categories."""
    categories = [
        SkillCategory(id=f"c{i}", name=f"Category {i}", icon="code")
        for i in range(count)
    ]
    skills = {f"c{i}": [f"Skill {i}"] for i in range(count)}
    return PortfolioDocument(
        skills=SkillsData(categories=categories, skills=skills),
        skills_display_mode=mode,
    )


@pytest.mark.parametrize(
    ("count", "expected_rows", "partial_flags"),
    [
        (1, 1, ["true"]),
        (3, 1, ["false"]),
        (4, 2, ["false", "true"]),
        (5, 2, ["false", "true"]),
        (6, 2, ["false", "false"]),
        (7, 3, ["false", "false", "true"]),
    ],
)
def test_skill_cards_chunk_into_rows(
    count: int, expected_rows: int, partial_flags: list[str]
) -> None:
    """Cards are grouped three to a row and short rows are flagged partial."""
    soup = _soup(render_skills(_skills_document(count), DEFAULT_THEME))
    rows = soup.select(".skills-row")
    assert len(rows) == expected_rows
    assert [row["data-partial"] for row in rows] == partial_flags
    assert len(soup.select(".skill-card")) == count


def test_skill_cards_skip_empty_categories(portfolio: PortfolioDocument) -> None:
    """Categories without skills are left out of the card grid."""
    soup = _soup(render_skills(portfolio, DEFAULT_THEME))
    names = [card.h3.get_text(strip=True) for card in soup.select(".skill-card")]
    assert names == ["Languages", "Tooling"]
    labels = [label.get_text() for label in soup.select(".skill-label")]
    assert labels == ["Python", "Rust", "Git"]


def test_skill_card_icon_fallback_uses_filtered_position() -> None:
    """Fallback icons rotate by position among rendered cards only."""
    document = PortfolioDocument(
        skills=SkillsData(
            categories=[
                SkillCategory(id="empty", name="Empty", icon="no-such-icon"),
                SkillCategory(id="odd", name="Oddities", icon="no-such-icon"),
            ],
            skills={"empty": [], "odd": ["Juggling"]},
        )
    )
    html = render_skills(document, DEFAULT_THEME)
    assert str(icon_svg(FALLBACK_ROTATION[0])) in html
    assert str(icon_svg(FALLBACK_ROTATION[1])) not in html


def test_skill_cards_empty_state() -> None:
    """Categories that all lack skills render the empty-state message."""
    document = PortfolioDocument(
        skills=SkillsData(categories=[SkillCategory(id="x", name="X")], skills={})
    )
    soup = _soup(render_skills(document, DEFAULT_THEME))
    assert soup.select_one(".skills-empty") is not None
    assert "No skills added yet." in soup.get_text()


def test_skills_absent_renders_nothing() -> None:
    """No skills block means no skills markup at all."""
    assert render_skills(PortfolioDocument(), DEFAULT_THEME) == ""
    assert render_skills(PortfolioDocument(skills=SkillsData()), DEFAULT_THEME) == ""


def test_rotating_mode_repeats_skill_sequence() -> None:
    """Carousel badges repeat the flattened skill list three times."""
    document = PortfolioDocument(
        skills=SkillsData(
            categories=[SkillCategory(id="x", name="X")],
            skills={"x": ["a", "b", "c"]},
        ),
        skills_display_mode="rotating",
    )
    soup = _soup(render_skills(document, DEFAULT_THEME))
    badges = [badge.get_text() for badge in soup.select(".skill-badge")]
    assert badges == ["a", "b", "c"] * 3
    assert soup.select_one(".skill-card") is None


def test_flatten_skills_follows_category_order() -> None:
    """Declared categories come first, then uncategorised skill lists."""
    skills = SkillsData(
        categories=[SkillCategory(id="b", name="B"), SkillCategory(id="a", name="A")],
        skills={"a": ["one"], "orphan": ["two"], "b": ["three"]},
    )
    assert flatten_skills(skills) == ["three", "one", "two"]


def test_chunk_rows_handles_empty_input() -> None:
    """An empty sequence produces no rows."""
    assert chunk_rows([]) == []


def test_about_embeds_skills_once(portfolio: PortfolioDocument) -> None:
    """The about section carries the skills sub-section and its paragraphs."""
    soup = _soup(render_about(portfolio, DEFAULT_THEME))
    paragraphs = [p.get_text() for p in soup.select("#about p")][:2]
    assert paragraphs == ["First paragraph.", "Second paragraph."]
    assert len(soup.select(".skills-cards")) == 1


def test_about_placeholder_and_guard() -> None:
    """Missing about text uses placeholder copy; unselected about is empty."""
    html = render_about(PortfolioDocument(), DEFAULT_THEME)
    assert "Add your about text here" in html
    document = PortfolioDocument(section_order=["hero"])
    assert render_about(document, DEFAULT_THEME) == ""


def test_hero_headshot_or_placeholder(portfolio: PortfolioDocument) -> None:
    """The hero shows the headshot when given and a placeholder otherwise."""
    soup = _soup(render_hero(portfolio, DEFAULT_THEME))
    assert soup.select_one(".hero-placeholder") is not None
    assert soup.h1.get_text() == "Ada Lovelace"

    with_headshot = dc.replace(portfolio, headshot_image="me.jpg")
    soup = _soup(render_hero(with_headshot, DEFAULT_THEME))
    image = soup.select_one(".hero-headshot")
    assert image is not None
    assert image["src"] == "me.jpg"


def test_projects_show_skill_overflow_badge(
    portfolio: PortfolioDocument, theme: ResolvedTheme
) -> None:
    """Only three skills are shown, followed by a ``+N more`` badge."""
    soup = _soup(render_projects(portfolio, theme))
    first, second = soup.select(".project-card")
    assert [s.get_text() for s in first.select(".project-skill")] == [
        "Mechanics",
        "Maths",
        "Brass",
    ]
    assert first.select_one(".project-skill-more").get_text() == "+2 more"
    assert second.select_one(".project-skill-more") is None
    assert "Translator&#39;s notes." in render_projects(portfolio, theme)
    row = soup.select_one(".projects-row")
    assert row["data-partial"] == "true"


def test_projects_guarded_by_order_and_data(portfolio: PortfolioDocument) -> None:
    """Projects render nothing when unselected or empty."""
    unselected = dc.replace(portfolio, section_order=["hero"])
    assert render_projects(unselected, DEFAULT_THEME) == ""
    empty = dc.replace(portfolio, projects=[])
    assert render_projects(empty, DEFAULT_THEME) == ""


@pytest.mark.parametrize(
    ("types", "expected"),
    [
        (["education"], "Education"),
        (["research", "education"], "Education & Research"),
        (["experience", "research", "education"], "Education, Experience, & Research"),
        (["experience", "experience"], "Experience"),
        ([], "Education, Experience & Research"),
        # Unrecognised types keep the generic heading.
        (["hobby"], "Education, Experience & Research"),
    ],
)
def test_timeline_title(types: list[str], expected: str) -> None:
    """The heading lists known entry types in a fixed order."""
    assert timeline_title(types) == expected


def test_timeline_alternates_sides(
    portfolio: PortfolioDocument, theme: ResolvedTheme
) -> None:
    """Even-indexed entries sit on the left, odd-indexed on the right."""
    soup = _soup(render_timeline(portfolio, theme))
    items = soup.select(".timeline-item")
    assert [item["data-side"] for item in items] == ["left", "right"]
    assert soup.select_one(".timeline-title").get_text() == "Education & Research"
    badges = [badge.get_text() for badge in soup.select(".timeline-badge")]
    assert badges == ["Research", "Education"]
    assert soup.select_one(".resume-download")["href"] == (
        "https://example.com/resume.pdf"
    )
    assert soup.select_one(".references-download") is None


def test_timeline_badge_colors(theme: ResolvedTheme) -> None:
    """Education uses the primary colour; research and others are fixed."""
    assert timeline_badge_color("education", theme) == "#112233"
    assert timeline_badge_color("research", theme) == "#8b5cf6"
    assert timeline_badge_color("experience", theme) == "#0ea5e9"
    assert timeline_badge_color(None, theme) == "#0ea5e9"


def test_timeline_empty_renders_nothing(portfolio: PortfolioDocument) -> None:
    """No timeline entries means no timeline section."""
    assert render_timeline(dc.replace(portfolio, timeline=[]), DEFAULT_THEME) == ""


def test_contact_lists_present_methods(
    portfolio: PortfolioDocument, theme: ResolvedTheme
) -> None:
    """Each available contact method appears with its display text."""
    soup = _soup(render_contact(portfolio, theme))
    methods = {
        method["data-method"]: method.a.get_text()
        for method in soup.select(".contact-method")
    }
    assert methods == {
        "email": "ada@example.com",
        "linkedin": "ada",
        "phone": "+44 20 0000 0000",
        "github": "ada",
    }
    interests = [item.get_text() for item in soup.select(".areas-of-interest .interest")]
    assert interests == ["Computing", "Poetry"]


def test_contact_without_contact_block() -> None:
    """A selected contact section without data still renders its shell."""
    soup = _soup(render_contact(PortfolioDocument(), DEFAULT_THEME))
    assert soup.select_one("#contact") is not None
    assert soup.select(".contact-method") == []
    assert soup.select_one(".areas-of-interest") is None


def test_contact_unselected_is_empty() -> None:
    """Contact is omitted when it is not in the section order."""
    document = PortfolioDocument(
        section_order=["hero"], contact=ContactInfo(email="a@b.c")
    )
    assert render_contact(document, DEFAULT_THEME) == ""


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/ada", "ada"),
        ("http://github.com/ada/engine", "ada/engine"),
        ("github.com/ada", "ada"),
    ],
)
def test_github_handle(url: str, expected: str) -> None:
    """GitHub display text drops the scheme and host."""
    assert github_handle(url) == expected


def test_linkedin_handle() -> None:
    """LinkedIn display text drops the scheme and profile prefix."""
    assert linkedin_handle("https://linkedin.com/in/ada") == "ada"


def test_footer_text_rules() -> None:
    """Descriptors are trimmed and joined; otherwise the title is used."""
    described = build_document({"title": "T", "footerDescriptors": [" a ", "", "b"]})
    assert footer_text(described) == "a | b"
    assert footer_text(build_document({"title": "Engineer"})) == "Engineer"
    assert footer_text(build_document({})) == ""


def test_footer_uses_generation_year(portfolio: PortfolioDocument) -> None:
    """The copyright line carries the year of generation and the name."""
    html = render_footer(
        portfolio,
        DEFAULT_THEME,
        generated_at=dt.datetime(2031, 5, 1, tzinfo=dt.UTC),
    )
    soup = _soup(html)
    assert "© 2031 Ada Lovelace. All rights reserved." in soup.get_text()
    assert soup.select_one(".footer-descriptors").get_text() == (
        "Mathematician | Writer"
    )
    labels = [link["aria-label"] for link in soup.select(".footer-links a")]
    assert labels == ["Email", "LinkedIn", "GitHub"]
