"""Inline span rendering: code spans, links, and autolinks."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from .constants import (
    AUTOLINK_PATTERN,
    CODE_SPAN_PATTERN,
    LINK_PATTERN,
    PLACEHOLDER_MARK,
    PLACEHOLDER_PATTERN,
)
from .escaping import escape_html


@dataclass
class PlaceholderMap:
    """Per-call store of rendered fragments hidden behind placeholder tokens.

    Tokens have the shape ``NUL <index> NUL``. Callers must remove NUL
    characters from literal text before protecting anything so that a token
    can never be confused with input.

    Attributes:
        fragments: Rendered HTML fragments, indexed by token number.
    """

    fragments: list[str] = field(default_factory=list)

    def protect(self, fragment: str) -> str:
        """Store `fragment` and return the token standing in for it."""
        self.fragments.append(fragment)
        return f"{PLACEHOLDER_MARK}{len(self.fragments) - 1}{PLACEHOLDER_MARK}"

    def restore(self, text: str) -> str:
        """Replace every token in `text` with its fragment in a single scan."""
        return PLACEHOLDER_PATTERN.sub(lambda match: self.fragments[int(match.group(1))], text)


def _protect_matches(
    text: str,
    pattern: re.Pattern[str],
    render: Callable[[re.Match[str]], str],
    placeholders: PlaceholderMap,
) -> str:
    spans = [(match.span(), render(match)) for match in pattern.finditer(text)]

    offset = 0
    text_parts = []
    for (start, end), fragment in spans:
        text_parts.append(text[offset:start])
        text_parts.append(placeholders.protect(fragment))
        offset = end
    text_parts.append(text[offset:])

    return "".join(text_parts)


def render_inline(text: str) -> str:
    """Render the inline spans of one line of Markdown as HTML.

    Inline code spans are extracted first, then ``[text](url)`` links, then
    bare ``http://`` and ``https://`` URLs. Each is rendered with its own
    escaping and hidden behind a placeholder; the remaining text is escaped
    once and the placeholders are substituted back.

    Args:
        text: Line content with block markers already removed.

    Returns:
        str: HTML for the line's content.

    Examples:
        render_inline("Use `<b>`")  # "Use <code>&lt;b&gt;</code>"
        render_inline("[Docs](https://example.com)")
        # '<a href="https://example.com">Docs</a>'
    """
    placeholders = PlaceholderMap()
    text = text.replace(PLACEHOLDER_MARK, "\ufffd")

    text = _protect_matches(
        text,
        CODE_SPAN_PATTERN,
        lambda match: f"<code>{escape_html(match.group(1))}</code>",
        placeholders,
    )

    # Link text may contain code spans protected above
    text = _protect_matches(
        text,
        LINK_PATTERN,
        lambda match: (
            f'<a href="{escape_html(match.group(2))}">'
            f"{placeholders.restore(escape_html(match.group(1)))}</a>"
        ),
        placeholders,
    )

    text = _protect_matches(
        text,
        AUTOLINK_PATTERN,
        lambda match: f'<a href="{escape_html(match.group(0))}">{escape_html(match.group(0))}</a>',
        placeholders,
    )

    return placeholders.restore(escape_html(text))
