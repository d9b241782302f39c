"""Resolve document colour overrides into a concrete page palette."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from folio_pages.document import ThemeColors


@dc.dataclass(frozen=True, slots=True)
class ResolvedTheme:
    """Concrete colour values used by every fragment on a page."""

    primary: str = "#0B3D91"
    secondary: str = "#17A2B8"
    accent: str = "#F3F4F6"
    background: str = "#ffffff"
    text: str = "#1f2937"


DEFAULT_THEME = ResolvedTheme()


def resolve_theme(colors: ThemeColors | None) -> ResolvedTheme:
    """Fill unset colours with the defaults.

    Examples
    --------
    >>> resolve_theme(None).primary
    '#0B3D91'
    """
    if colors is None:
        return DEFAULT_THEME
    return ResolvedTheme(
        primary=colors.primary or DEFAULT_THEME.primary,
        secondary=colors.secondary or DEFAULT_THEME.secondary,
        accent=colors.accent or DEFAULT_THEME.accent,
        background=colors.background or DEFAULT_THEME.background,
        text=colors.text or DEFAULT_THEME.text,
    )


__all__ = ["DEFAULT_THEME", "ResolvedTheme", "resolve_theme"]
