"""Line classification for the Markdown subset."""

from __future__ import annotations

from .constants import (
    FENCE_DELIMITER,
    HEADER_PATTERN,
    ORDERED_ITEM_PATTERN,
    TAB_WIDTH,
    UNORDERED_ITEM_PREFIX,
)
from .models import LineClassification, LineKind


def indentation_depth(line: str) -> int:
    """Compute the indentation depth of a line.

    Each leading space counts as one column and each leading tab as four.

    Args:
        line: Untrimmed line.

    Returns:
        int: Width of the leading whitespace.

    Examples:
        indentation_depth("  - item")  # 2
        indentation_depth("\\t- item")  # 4
    """
    depth = 0
    for character in line:
        if character == " ":
            depth += 1
        elif character == "\t":
            depth += TAB_WIDTH
        else:
            break
    return depth


def classify_line(line: str) -> LineClassification:
    """Determine the semantic type of a single line.

    Rules are checked in order against the line stripped of surrounding
    whitespace: blank, fence delimiter, header, unordered item, ordered item,
    paragraph. List depth is measured on the untrimmed line.

    Args:
        line: Raw line without its line terminator.

    Returns:
        LineClassification: The line's kind and extracted text.

    Examples:
        classify_line("## Setup")  # HEADER, level 2, text "Setup"
        classify_line("  - nested")  # UNORDERED_ITEM, depth 2, text "nested"
    """
    trimmed = line.strip()

    if not trimmed:
        return LineClassification(LineKind.BLANK)

    if trimmed == FENCE_DELIMITER:
        return LineClassification(LineKind.FENCE, depth=indentation_depth(line))

    header_match = HEADER_PATTERN.match(trimmed)
    if header_match:
        return LineClassification(
            LineKind.HEADER,
            text=header_match.group(2),
            level=len(header_match.group(1)),
        )

    if trimmed.startswith(UNORDERED_ITEM_PREFIX):
        return LineClassification(
            LineKind.UNORDERED_ITEM,
            text=trimmed[len(UNORDERED_ITEM_PREFIX) :],
            depth=indentation_depth(line),
        )

    ordered_match = ORDERED_ITEM_PATTERN.match(trimmed)
    if ordered_match:
        return LineClassification(
            LineKind.ORDERED_ITEM,
            text=ordered_match.group(1),
            depth=indentation_depth(line),
        )

    return LineClassification(LineKind.PARAGRAPH, text=trimmed)
