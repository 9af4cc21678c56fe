"""HTML escaping for literal text."""

from __future__ import annotations

# Ampersand first so entities produced by later replacements stay intact
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: str) -> str:
    """Escape the five HTML-sensitive characters in `text`.

    Escaping is a single pass and is not idempotent: escaping already escaped
    text escapes the ampersands of its entities again.

    Args:
        text: Literal text to escape.

    Returns:
        str: Text safe to embed in HTML element content and attribute values.

    Examples:
        escape_html("Tom & Jerry")  # "Tom &amp; Jerry"
        escape_html("<a href='x'>")  # "&lt;a href=&#39;x&#39;&gt;"
    """
    for character, entity in _REPLACEMENTS:
        text = text.replace(character, entity)
    return text
