"""Skill-category icon lookup.

Category cards carry a white outline icon. The icon is chosen from a static
table keyed by the category's ``icon`` identifier, or by its display name when
no identifier is set. Identifiers are matched case-insensitively; anything the
table does not know rotates through :data:`FALLBACK_ROTATION` by the card's
position so neighbouring cards still look distinct.

Examples
--------
>>> from folio_pages.render.icons import resolve_icon, icon_svg
>>> resolve_icon("Code", None, 0) == icon_svg("code")
True
>>> resolve_icon(None, "Underwater Basket Weaving", 2) == icon_svg("people")
True
"""

from __future__ import annotations

from markupsafe import Markup

ICON_PATHS: dict[str, tuple[str, ...]] = {
    "star": (
        "M11.049 2.927c.3-.921 1.603-.921 1.902 0l1.519 4.674a1 1 0 00.95.69h4.915c.969 0 1.371 1.24.588 1.81l-3.976 2.888a1 1 0 00-.363 1.118l1.518 4.674c.3.922-.755 1.688-1.538 1.118l-3.976-2.888a1 1 0 00-1.176 0l-3.976 2.888c-.783.57-1.838-.197-1.538-1.118l1.518-4.674a1 1 0 00-.363-1.118l-3.976-2.888c-.784-.57-.38-1.81.588-1.81h4.914a1 1 0 00.951-.69l1.519-4.674z",
    ),
    "check": ("M9 12l2 2 4-4m6 2a9 9 0 11-18 0 9 9 0 0118 0z",),
    "people": (
        "M17 20h5v-2a3 3 0 00-5.356-1.857M17 20H7m10 0v-2c0-.656-.126-1.283-.356-1.857M7 20H2v-2a3 3 0 015.356-1.857M7 20v-2c0-.656.126-1.283.356-1.857m0 0a5.002 5.002 0 019.288 0M15 7a3 3 0 11-6 0 3 3 0 016 0zm6 3a2 2 0 11-4 0 2 2 0 014 0zM7 10a2 2 0 11-4 0 2 2 0 014 0z",
    ),
    "code": (
        "M9 3v2m6-2v2M9 19v2m6-2v2M5 9H3m2 6H3m18-6h-2m2 6h-2M7 19h10a2 2 0 002-2V7a2 2 0 00-2-2H7a2 2 0 00-2 2v10a2 2 0 002 2zM9 9h6v6H9V9z",
    ),
    "tool": (
        "M10.325 4.317c.426-1.756 2.924-1.756 3.35 0a1.724 1.724 0 002.573 1.066c1.543-.94 3.31.826 2.37 2.37a1.724 1.724 0 001.065 2.572c1.756.426 1.756 2.924 0 3.35a1.724 1.724 0 00-1.066 2.573c.94 1.543-.826 3.31-2.37 2.37a1.724 1.724 0 00-2.572 1.065c-.426 1.756-2.924 1.756-3.35 0a1.724 1.724 0 00-2.573-1.066c-1.543.94-3.31-.826-2.37-2.37a1.724 1.724 0 00-1.065-2.572c-1.756-.426-1.756-2.924 0-3.35a1.724 1.724 0 001.066-2.573c-.94-1.543.826-3.31 2.37-2.37.996.608 2.296.07 2.572-1.065z",
        "M15 12a3 3 0 11-6 0 3 3 0 016 0z",
    ),
    "design": (
        "M7 21a4 4 0 01-4-4V5a2 2 0 012-2h4a2 2 0 012 2v12a4 4 0 01-4 4zM21 5a2 2 0 00-2-2h-4a2 2 0 00-2 2v12a4 4 0 004 4h4a2 2 0 002-2V5z",
    ),
    "language": (
        "M3 5h12M9 3v2m1.048 9.5A18.022 18.022 0 016.412 9m6.088 9h7M11 21l5-10 5 10M12.751 5C11.783 10.77 8.07 15.61 3 18.129",
    ),
    "heart": (
        "M4.318 6.318a4.5 4.5 0 000 6.364L12 20.364l7.682-7.682a4.5 4.5 0 00-6.364-6.364L12 7.636l-1.318-1.318a4.5 4.5 0 00-6.364 0z",
    ),
    "certification": (
        "M9 12l2 2 4-4M7.835 4.697a3.42 3.42 0 001.946-.806 3.42 3.42 0 014.438 0 3.42 3.42 0 001.946.806 3.42 3.42 0 013.138 3.138 3.42 3.42 0 00.806 1.946 3.42 3.42 0 010 4.438 3.42 3.42 0 00-.806 1.946 3.42 3.42 0 01-3.138 3.138 3.42 3.42 0 00-1.946.806 3.42 3.42 0 01-4.438 0 3.42 3.42 0 00-1.946-.806 3.42 3.42 0 01-3.138-3.138 3.42 3.42 0 00-.806-1.946 3.42 3.42 0 010-4.438 3.42 3.42 0 00.806-1.946 3.42 3.42 0 013.138-3.138z",
    ),
    "framework": (
        "M19 11H5m14 0a2 2 0 012 2v6a2 2 0 01-2 2H5a2 2 0 01-2-2v-6a2 2 0 012-2m14 0V9a2 2 0 00-2-2M5 11V9a2 2 0 012-2m0 0V5a2 2 0 012-2h6a2 2 0 012 2v2M7 7h10",
    ),
    "database": (
        "M4 7v10c0 2.21 3.582 4 8 4s8-1.79 8-4V7M4 7c0 2.21 3.582 4 8 4s8-1.79 8-4M4 7c0-2.21 3.582-4 8-4s8 1.79 8 4m0 5c0 2.21-3.582 4-8 4s-8-1.79-8-4",
    ),
    "cloud": (
        "M7 16a4 4 0 01-.88-7.903A5 5 0 1115.9 6L16 6a5 5 0 011 9.9M9 19l3 3m0 0l3-3m-3 3V10",
    ),
    "mobile": (
        "M12 18h.01M8 21h8a2 2 0 002-2V5a2 2 0 00-2-2H8a2 2 0 00-2 2v14a2 2 0 002 2z",
    ),
    "analytics": (
        "M9 19v-6a2 2 0 00-2-2H5a2 2 0 00-2 2v6a2 2 0 002 2h2a2 2 0 002-2zm0 0V9a2 2 0 012-2h2a2 2 0 012 2v10m-6 0a2 2 0 002 2h2a2 2 0 002-2m0 0V5a2 2 0 012-2h2a2 2 0 012 2v14a2 2 0 01-2 2h-2a2 2 0 01-2-2z",
    ),
    "research": (
        "M9.663 17h4.673M12 3v1m6.364 1.636l-.707.707M21 12h-1M4 12H3m3.343-5.657l-.707-.707m2.828 9.9a5 5 0 117.072 0l-.548.547A3.374 3.374 0 0014 18.469V19a2 2 0 11-4 0v-.531c0-.895-.356-1.754-.988-2.386l-.548-.547z",
    ),
    "communication": (
        "M8 12h.01M12 12h.01M16 12h.01M21 12c0 4.418-4.03 8-9 8a9.863 9.863 0 01-4.255-.949L3 20l1.395-3.72C3.512 15.042 3 13.574 3 12c0-4.418 4.03-8 9-8s9 3.582 9 8z",
    ),
    "leadership": ("M13 10V3L4 14h7v7l9-11h-7z",),
    "security": (
        "M9 12l2 2 4-4m5.618-4.016A11.955 11.955 0 0112 2.944a11.955 11.955 0 01-8.618 3.04A12.02 12.02 0 003 9c0 5.591 3.824 10.29 9 11.622 5.176-1.332 9-6.03 9-11.622 0-1.042-.133-2.052-.382-3.016z",
    ),
    "blockchain": (
        "M13.828 10.172a4 4 0 00-5.656 0l-4 4a4 4 0 105.656 5.656l1.102-1.101m-.758-4.899a4 4 0 005.656 0l4-4a4 4 0 00-5.656-5.656l-1.1 1.1",
    ),
    "gaming": (
        "M14.828 14.828a4 4 0 01-5.656 0M9 10h1m4 0h1m-6 4h.01M21 12a9 9 0 11-18 0 9 9 0 0118 0z",
    ),
    "finance": (
        "M12 8c-1.657 0-3 .895-3 2s1.343 2 3 2 3 .895 3 2-1.343 2-3 2m0-8c1.11 0 2.08.402 2.599 1M12 8V7m0 1v8m0 0v1m0-1c-1.11 0-2.08-.402-2.599-1",
    ),
    "education": (
        "M12 6.253v13m0-13C10.832 5.477 9.246 5 7.5 5S4.168 5.477 3 6.253v13C4.168 18.477 5.754 18 7.5 18s3.332.477 4.5 1.253m0-13C13.168 5.477 14.754 5 16.5 5c1.746 0 3.332.477 4.5 1.253v13C19.832 18.477 18.246 18 16.5 18c-1.746 0-3.332.477-4.5 1.253",
    ),
    "marketing": (
        "M11 5.882V19.24a1.76 1.76 0 01-3.417.592l-2.147-6.15M18 13a3 3 0 100-6M5.436 13.683A4.001 4.001 0 017 6h1.832c4.1 0 7.625-1.234 9.168-3v14c-1.543-1.766-5.067-3-9.168-3H7a3.988 3.988 0 01-1.564-.317z",
    ),
    "sales": ("M16 11V7a4 4 0 00-8 0v4M5 9h14l1 12H4L5 9z",),
    "consulting": (
        "M8.228 9c.549-1.165 2.03-2 3.772-2 2.21 0 4 1.343 4 3 0 1.4-1.278 2.575-3.006 2.907-.542.104-.994.54-.994 1.093m0 3h.01M21 12a9 9 0 11-18 0 9 9 0 0118 0z",
    ),
}

# Normalized identifier -> key into ICON_PATHS.
ICON_ALIASES: dict[str, str] = {
    "star": "star",
    "check": "check",
    "testing": "check",
    "people": "people",
    "professional": "people",
    "professional skills": "people",
    "code": "code",
    "technical": "code",
    "technical skills": "code",
    "tool": "tool",
    "engineering": "tool",
    "engineering expertise": "tool",
    "devops": "tool",
    "design": "design",
    "creative": "design",
    "language": "language",
    "heart": "heart",
    "soft": "heart",
    "healthcare": "heart",
    "volunteer": "heart",
    "certification": "certification",
    "framework": "framework",
    "database": "database",
    "cloud": "cloud",
    "mobile": "mobile",
    "management": "analytics",
    "analytics": "analytics",
    "research": "research",
    "ai": "research",
    "communication": "communication",
    "leadership": "leadership",
    "startup": "leadership",
    "security": "security",
    "blockchain": "blockchain",
    "gaming": "gaming",
    "finance": "finance",
    "education": "education",
    "marketing": "marketing",
    "sales": "sales",
    "consulting": "consulting",
}

FALLBACK_ROTATION: tuple[str, ...] = ("star", "check", "people", "check", "framework")


def icon_svg(key: str) -> Markup:
    """Return the white outline SVG for an :data:`ICON_PATHS` key."""
    paths = "".join(
        '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
        f'd="{d}"></path>'
        for d in ICON_PATHS[key]
    )
    return Markup(
        '<svg class="w-8 h-8 text-white" fill="none" stroke="currentColor" '
        f'viewBox="0 0 24 24">{paths}</svg>'
    )


def resolve_icon(icon: str | None, name: str | None, index: int = 0) -> Markup:
    """Return the icon for a skill category.

    Parameters
    ----------
    icon : str or None
        Preferred icon identifier stored on the category.
    name : str or None
        Category display name, consulted when ``icon`` is unset.
    index : int, optional
        Position of the card among rendered cards; selects the fallback icon
        when the identifier is unknown.

    Returns
    -------
    Markup
        SVG markup that is safe to embed without escaping.
    """
    identifier = (icon or name or "").lower()
    key = ICON_ALIASES.get(identifier)
    if key is None:
        key = FALLBACK_ROTATION[index % len(FALLBACK_ROTATION)]
    return icon_svg(key)


__all__ = [
    "FALLBACK_ROTATION",
    "ICON_ALIASES",
    "ICON_PATHS",
    "icon_svg",
    "resolve_icon",
]
