"""HTML escaping shared by every template in the package."""

from __future__ import annotations

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(value: object | None) -> str:
    """Return ``value`` as HTML-safe text.

    ``None``, ``False``, and blank strings map to ``""`` so absent fields never
    leak ``"None"`` into markup.

    Examples
    --------
    >>> escape_html("<b>Tom & 'Jerry'</b>")
    '&lt;b&gt;Tom &amp; &#39;Jerry&#39;&lt;/b&gt;'
    >>> escape_html(None)
    ''
    >>> escape_html("   ")
    ''
    """
    if value is None or value is False:
        return ""
    text = str(value)
    if not text.strip():
        return ""
    return text.translate(_ESCAPES)


__all__ = ["escape_html"]
