import pytest

from md2html.classifier import classify_line, indentation_depth
from md2html.models import LineClassification, LineKind


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("text", 0),
        ("  text", 2),
        ("\ttext", 4),
        (" \t text", 6),
        ("", 0),
        ("    ", 4),
    ],
)
def test_indentation_depth(line: str, expected: int):
    assert indentation_depth(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
def test_blank_lines(line: str):
    assert classify_line(line) == LineClassification(LineKind.BLANK)


def test_fence_delimiter_is_detected_after_trimming():
    classification = classify_line("  ```  ")

    assert classification.kind is LineKind.FENCE
    assert classification.depth == 2


@pytest.mark.parametrize("line", ["````", "```python", "``"])
def test_other_backtick_runs_are_paragraphs(line: str):
    assert classify_line(line).kind is LineKind.PARAGRAPH


@pytest.mark.parametrize(
    ("line", "level", "text"),
    [
        ("# Main Title", 1, "Main Title"),
        ("## Subtitle", 2, "Subtitle"),
        ("### Sub Subtitle", 3, "Sub Subtitle"),
        ("#### Level four", 4, "Level four"),
        ("   # Indented", 1, "Indented"),
    ],
)
def test_headers(line: str, level: int, text: str):
    classification = classify_line(line)

    assert classification.kind is LineKind.HEADER
    assert classification.level == level
    assert classification.text == text


@pytest.mark.parametrize("line", ["##### Too deep", "#NoSpace", "#"])
def test_header_lookalikes_are_paragraphs(line: str):
    classification = classify_line(line)

    assert classification.kind is LineKind.PARAGRAPH
    assert classification.text == line.strip()


def test_unordered_item_keeps_untrimmed_depth():
    classification = classify_line("    - nested item")

    assert classification == LineClassification(
        LineKind.UNORDERED_ITEM, text="nested item", depth=4
    )
    assert classification.is_list_item
    assert classification.list_tag == "ul"


def test_ordered_item_strips_number_and_dot():
    classification = classify_line("\t10. tenth step")

    assert classification == LineClassification(LineKind.ORDERED_ITEM, text="tenth step", depth=4)
    assert classification.list_tag == "ol"


@pytest.mark.parametrize("line", ["-item", "1.item", "1)", "a. letter"])
def test_marker_lookalikes_are_paragraphs(line: str):
    assert classify_line(line).kind is LineKind.PARAGRAPH


def test_paragraph_text_is_trimmed():
    assert classify_line("   Some text  ") == LineClassification(
        LineKind.PARAGRAPH, text="Some text"
    )
