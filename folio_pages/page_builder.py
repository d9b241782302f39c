"""Shared plumbing for the page builders.

Every output page follows the same pipeline: resolve the theme, build a template
context from the document, render a Jinja template from
``folio_pages/templates``, and write UTF-8 HTML into the output directory.
:class:`PageBuilder` holds that pipeline; subclasses name the template, the
output filename, and their navigation and extra context.
"""

from __future__ import annotations

import abc
import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from ._constants import TAILWIND_CDN_URL
from .render import get_environment, resolve_theme

if typ.TYPE_CHECKING:
    from .document import PortfolioDocument
    from .render import ResolvedTheme


@dc.dataclass(slots=True)
class NavLink:
    """Navigation entry in the fixed page header."""

    label: str
    href: str
    current: bool = False


class PageBuilder(abc.ABC):
    """Render one HTML page from a portfolio document."""

    template_name: typ.ClassVar[str]
    filename: typ.ClassVar[str]

    def __init__(
        self, document: PortfolioDocument, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and load its template.

        Parameters
        ----------
        document : PortfolioDocument
            Parsed portfolio document; never mutated.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates``.
        """
        self.document = document
        self.theme: ResolvedTheme = resolve_theme(document.theme_colors)
        self.env = get_environment(templates_dir)
        self.template = self.env.get_template(self.template_name)

    @abc.abstractmethod
    def nav_links(self) -> list[NavLink]:
        """Return the navigation entries shown in the page header."""

    def extra_context(self, generated_at: dt.datetime) -> dict[str, object]:
        """Return page-specific template variables."""
        return {}

    def render(self, generated_at: dt.datetime | None = None) -> str:
        """Render the page HTML, ensuring it ends with a newline."""
        timestamp = generated_at or dt.datetime.now(dt.UTC)
        context: dict[str, object] = {
            "document": self.document,
            "theme": self.theme,
            "cdn_url": TAILWIND_CDN_URL,
            "nav_links": self.nav_links(),
        }
        context.update(self.extra_context(timestamp))
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, html: str, output_dir: Path) -> Path:
        """Write rendered ``html`` into ``output_dir`` and return the path."""
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / self.filename
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def run(
        self, output_dir: Path, *, generated_at: dt.datetime | None = None
    ) -> Path:
        """Render and write the page, returning the output path.

        Filesystem errors raised while writing propagate to the caller.
        """
        return self.write(self.render(generated_at), output_dir)


__all__ = ["NavLink", "PageBuilder"]
