"""Load and model the portfolio document that drives page rendering.

This subpackage decodes the JSON (or YAML) portfolio document, applies the
lenient coercion rules of the input format, and produces the typed
:class:`PortfolioDocument` that every renderer consumes. The primary entry
point is :func:`load_document`; :func:`build_document` converts an already
parsed mapping.

Examples
--------
>>> from folio_pages.document import build_document
>>> document = build_document({"name": "Ada", "sectionOrder": ["hero"]})
>>> document.section_order
['hero']
>>> build_document({}).skills_display_mode
'card'
"""

from .builders import build_document
from .loader import load_document
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
    "build_document",
    "load_document",
]
