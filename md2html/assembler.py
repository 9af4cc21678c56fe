"""Block assembly: turns Markdown lines into an HTML body."""

from __future__ import annotations

from .classifier import classify_line, indentation_depth
from .config import Md2HtmlConfig
from .constants import DEFAULT_CODE_BLOCK_CLASS, ITEM_INDENT_OFFSET, LIST_INDENT_WIDTH
from .escaping import escape_html
from .inline import render_inline
from .models import LineClassification, LineCursor, LineKind, ListLevel


def split_lines(markdown: str) -> tuple[str, ...]:
    """Split Markdown text into lines, normalising Windows line endings.

    A trailing newline produces a final empty line, which renders as a
    blank-line separator.

    Examples:
        split_lines("a\\r\\nb")  # ("a", "b")
    """
    return tuple(markdown.replace("\r\n", "\n").split("\n"))


def strip_indentation(line: str, depth: int) -> str:
    """Remove up to `depth` columns of leading whitespace from `line`.

    A tab that would cross the `depth` boundary is kept, as is any
    non-whitespace character.

    Examples:
        strip_indentation("      x = 1", 4)  # "  x = 1"
        strip_indentation("  x", 4)  # "x"
    """
    columns = 0
    position = 0
    while position < len(line) and columns < depth:
        width = indentation_depth(line[position])
        if width == 0 or columns + width > depth:
            break
        columns += width
        position += 1
    return line[position:]


def collect_fence(cursor: LineCursor, strip_depth: int = 0) -> list[str]:
    """Collect the raw lines of a fenced code block.

    The cursor must sit on the first line after the opening delimiter. Lines
    are buffered without classification until a closing delimiter, which is
    consumed, or the end of input.

    Args:
        cursor: Cursor positioned after the opening fence.
        strip_depth: Columns of indentation removed from each buffered line.

    Returns:
        list[str]: Code lines in source order.
    """
    code_lines = []
    while not cursor.at_end():
        line = cursor.advance()
        if classify_line(line).kind is LineKind.FENCE:
            break
        code_lines.append(strip_indentation(line, strip_depth) if strip_depth else line)
    return code_lines


def render_code_block(
    code_lines: list[str], css_class: str = DEFAULT_CODE_BLOCK_CLASS, indent: str = ""
) -> str:
    """Render collected code lines as an escaped ``<pre><code>`` section."""
    code = escape_html("\n".join(code_lines))
    return (
        f'{indent}<section class="{escape_html(css_class)}">\n'
        f"{indent}<pre><code>{code}</code></pre>\n"
        f"{indent}</section>\n"
    )


def render_single_line(classification: LineClassification) -> str:
    """Render a header or paragraph line, without a trailing newline."""
    if classification.kind is LineKind.HEADER:
        tag = f"h{classification.level}"
    else:
        tag = "p"
    return f"<{tag}>{render_inline(classification.text)}</{tag}>"


class ListBuilder:
    """Emit nested ``<ul>``/``<ol>`` markup for one run of list items.

    Keeps a stack of open `ListLevel` scopes. An item deeper than the top of
    the stack opens a nested list inside the still-open ``<li>``; an item at
    the same depth closes the previous ``<li>``; a shallower item closes every
    deeper list together with the ``<li>`` containing it. The list type of a
    depth is fixed by the first item seen at that depth within the run.
    """

    def __init__(self, code_block_class: str = DEFAULT_CODE_BLOCK_CLASS):
        self.code_block_class = code_block_class
        self.levels: list[ListLevel] = []
        self._tags_by_depth: dict[int, str] = {}
        self._parts: list[str] = []
        # True while the last emitted text is an unterminated "<li>content"
        self._inline_item = False

    def owns_fence(self, depth: int) -> bool:
        """Whether a fence at `depth` is nested inside the current list item."""
        return bool(self.levels) and depth > self.levels[0].depth

    def add_item(self, item: LineClassification) -> None:
        if not self.levels or item.depth > self.levels[-1].depth:
            self._open_level(item)
        else:
            while len(self.levels) > 1 and self.levels[-1].depth > item.depth:
                self._close_item()
                self._close_level()
            self._close_item()
        self._open_item(item.text)

    def add_code_block(self, code_lines: list[str]) -> None:
        self._end_inline_item()
        indent = " " * (LIST_INDENT_WIDTH * len(self.levels))
        self._parts.append(render_code_block(code_lines, self.code_block_class, indent))

    def finish(self) -> str:
        while self.levels:
            self._close_item()
            self._close_level()
        return "".join(self._parts)

    def _open_level(self, item: LineClassification) -> None:
        self._end_inline_item()
        tag = self._tags_by_depth.setdefault(item.depth, item.list_tag)
        indent = " " * (LIST_INDENT_WIDTH * len(self.levels))
        self._parts.append(f"{indent}<{tag}>\n")
        self.levels.append(ListLevel(depth=item.depth, tag=tag))

    def _close_level(self) -> None:
        level = self.levels.pop()
        indent = " " * (LIST_INDENT_WIDTH * len(self.levels))
        self._parts.append(f"{indent}</{level.tag}>\n")

    def _open_item(self, text: str) -> None:
        level = self.levels[-1]
        self._parts.append(f"{self._item_indent()}<li>{render_inline(text)}")
        level.item_open = True
        self._inline_item = True

    def _close_item(self) -> None:
        level = self.levels[-1]
        if not level.item_open:
            return
        if self._inline_item:
            self._parts.append("</li>\n")
        else:
            self._parts.append(f"{self._item_indent()}</li>\n")
        level.item_open = False
        self._inline_item = False

    def _end_inline_item(self) -> None:
        if self._inline_item:
            self._parts.append("\n")
            self._inline_item = False

    def _item_indent(self) -> str:
        return " " * (LIST_INDENT_WIDTH * (len(self.levels) - 1) + ITEM_INDENT_OFFSET)


def _next_content_line(cursor: LineCursor) -> LineClassification | None:
    offset = 0
    while True:
        line = cursor.peek(offset)
        if line is None:
            return None
        classification = classify_line(line)
        if classification.kind is not LineKind.BLANK:
            return classification
        offset += 1


def _continues_list(builder: ListBuilder, classification: LineClassification | None) -> bool:
    if classification is None:
        return False
    if classification.is_list_item:
        return True
    return classification.kind is LineKind.FENCE and builder.owns_fence(classification.depth)


def render_list_run(cursor: LineCursor, code_block_class: str = DEFAULT_CODE_BLOCK_CLASS) -> str:
    """Consume a run of list items starting at the cursor and render it.

    Blank lines are swallowed when the run continues after them. A fence
    indented deeper than the outermost list is rendered inside the open
    ``<li>`` with its lines stripped to the fence's own indentation. Any other
    line ends the run and is left for the caller.

    Args:
        cursor: Cursor positioned on the first list item of the run.
        code_block_class: CSS class for nested code sections.

    Returns:
        str: Balanced list markup ending with a newline.
    """
    builder = ListBuilder(code_block_class)

    while not cursor.at_end():
        classification = classify_line(cursor.current())

        if classification.is_list_item:
            builder.add_item(classification)
            cursor.advance()
            continue

        if classification.kind is LineKind.BLANK:
            if not _continues_list(builder, _next_content_line(cursor)):
                break
            cursor.advance()
            continue

        if classification.kind is LineKind.FENCE and builder.owns_fence(classification.depth):
            cursor.advance()
            builder.add_code_block(collect_fence(cursor, strip_depth=classification.depth))
            continue

        break

    return builder.finish()


def generate_html_body(markdown: str, config: Md2HtmlConfig | None = None) -> str:
    """Convert Markdown text into an HTML body fragment.

    Walks the lines once with a cursor. Fence delimiters start a code block,
    list items start a list run, runs of blank lines collapse into a single
    empty output line, and headers and paragraphs are rendered one line at a
    time. Unterminated fences and lists are closed at end of input; no input
    text is rejected.

    Args:
        markdown: Markdown source text.
        config: Configuration supplying the code block CSS class. Defaults to
            a new `Md2HtmlConfig` when omitted.

    Returns:
        str: HTML body, one block per line.

    Examples:
        generate_html_body("# Title")  # "<h1>Title</h1>\\n"
        generate_html_body("- a\\n- b")
        # "<ul>\\n    <li>a</li>\\n    <li>b</li>\\n</ul>\\n"
    """
    config = config or Md2HtmlConfig()
    cursor = LineCursor(split_lines(markdown))
    output: list[str] = []

    while not cursor.at_end():
        classification = classify_line(cursor.current())

        if classification.kind is LineKind.FENCE:
            cursor.advance()
            output.append(render_code_block(collect_fence(cursor), config.code_block_class))
            continue

        if classification.is_list_item:
            output.append(render_list_run(cursor, config.code_block_class))
            continue

        if classification.kind is LineKind.BLANK:
            while not cursor.at_end() and classify_line(cursor.current()).kind is LineKind.BLANK:
                cursor.advance()
            output.append("\n")
            continue

        output.append(f"{render_single_line(classification)}\n")
        cursor.advance()

    return "".join(output)
