"""Data models for md2html."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Semantic categories a single Markdown line can fall into.

    Attributes:
        BLANK: Empty or whitespace-only line.
        HEADER: ATX header with one to four ``#`` characters.
        ORDERED_ITEM: Numbered list item such as ``1. text``.
        UNORDERED_ITEM: Bulleted list item such as ``- text``.
        FENCE: Fenced code block delimiter (three backticks).
        PARAGRAPH: Any other line of text.
    """

    BLANK = auto()
    HEADER = auto()
    ORDERED_ITEM = auto()
    UNORDERED_ITEM = auto()
    FENCE = auto()
    PARAGRAPH = auto()


@dataclass(frozen=True)
class LineClassification:
    """Classification of one Markdown line.

    Attributes:
        kind: Semantic category of the line.
        text: Content left after removing block markers (header hashes, list
            markers) and surrounding whitespace.
        depth: Indentation depth of the untrimmed line.
        level: Header level for `LineKind.HEADER`, otherwise 0.
    """

    kind: LineKind
    text: str = ""
    depth: int = 0
    level: int = 0

    @property
    def is_list_item(self) -> bool:
        return self.kind in (LineKind.ORDERED_ITEM, LineKind.UNORDERED_ITEM)

    @property
    def list_tag(self) -> str:
        return "ol" if self.kind is LineKind.ORDERED_ITEM else "ul"


@dataclass
class ListLevel:
    """An open list scope while assembling a list run.

    Attributes:
        depth: Source indentation depth of the items at this level.
        tag: HTML list tag, ``"ul"`` or ``"ol"``.
        item_open: Whether an ``<li>`` at this level is still open.
    """

    depth: int
    tag: str
    item_open: bool = False


@dataclass
class LineCursor:
    """Explicit cursor over an immutable sequence of lines.

    Attributes:
        lines: Lines of the document without line terminators.
        index: Zero-based index of the current line.
    """

    lines: tuple[str, ...]
    index: int = 0

    def at_end(self) -> bool:
        return self.index >= len(self.lines)

    def current(self) -> str:
        return self.lines[self.index]

    def peek(self, offset: int = 1) -> str | None:
        position = self.index + offset
        if 0 <= position < len(self.lines):
            return self.lines[position]
        return None

    def advance(self) -> str:
        line = self.lines[self.index]
        self.index += 1
        return line


@dataclass(frozen=True)
class TemplateData:
    """Values substituted into a page template.

    Attributes:
        Title: Document title.
        Content: Rendered HTML body.
    """

    Title: str
    Content: str
