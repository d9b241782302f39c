"""Common literal values used across folio_pages.

These constants keep output filenames, the stylesheet CDN, and the default
section order centralized so templates, builders, and tests can import the same
values without drifting. Intended for internal use within the folio_pages
package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.INDEX_FILENAME
'index.html'
>>> _constants.DEFAULT_SECTION_ORDER[0]
'hero'
"""

INDEX_FILENAME = "index.html"
REFERENCES_FILENAME = "references.html"
PROJECTS_FILENAME = "projects.html"

TAILWIND_CDN_URL = "https://cdn.tailwindcss.com"

SECTION_IDS = ("hero", "about", "skills", "projects", "timeline", "contact")
DEFAULT_SECTION_ORDER = SECTION_IDS

TIMELINE_TYPE_ORDER = ("education", "experience", "research")
TIMELINE_FALLBACK_TITLE = "Education, Experience & Research"

ROW_SIZE = 3
PROJECT_SKILL_PREVIEW = 3
CAROUSEL_REPEAT = 3

USAGE = "Usage: folio-pages <data-file-path>"
