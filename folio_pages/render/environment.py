"""Jinja environment shared by the fragment renderers and page builders.

Templates live under ``folio_pages/templates``. Autoescaping is replaced by a
``finalize`` hook that routes every ``{{ ... }}`` value through
:func:`~folio_pages.render.escaping.escape_html`, so the package-wide escaping
contract (``&quot;`` and ``&#39;`` for quotes, blank values rendered as
nothing) applies uniformly. Values wrapped in :class:`markupsafe.Markup`, or
passed through the ``safe`` filter, are emitted verbatim; renderers use that for
nested fragments and icon SVG only.
"""

from __future__ import annotations

import functools
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .escaping import escape_html

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def _finalize(value: object) -> object:
    if isinstance(value, Markup):
        return value
    return escape_html(value)


@functools.cache
def get_environment(templates_dir: Path | None = None) -> Environment:
    """Return a cached Jinja environment rooted at ``templates_dir``.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing the templates. Defaults to the package templates.

    Returns
    -------
    Environment
        Environment with ``trim_blocks``/``lstrip_blocks`` enabled and the
        escaping ``finalize`` hook installed.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=False,
        finalize=_finalize,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(
    template_name: str, *, env: Environment | None = None, **context: object
) -> str:
    """Render ``template_name`` with ``context``.

    ``env`` defaults to the environment over the package templates.
    """
    environment = env or get_environment()
    return environment.get_template(template_name).render(**context)


__all__ = ["TEMPLATES_DIR", "get_environment", "render_template"]
