"""Markdown to HTML document conversion."""

from __future__ import annotations

from pathlib import Path

from .assembler import generate_html_body
from .config import ConfigError, Md2HtmlConfig, validate_config
from .constants import DEFAULT_TEMPLATE
from .exceptions import TemplateError
from .filesystem import read_text_file
from .renderer import render_template


def convert(
    markdown: str,
    template_text: str | None = None,
    title: str = "",
    config: Md2HtmlConfig | None = None,
) -> str:
    """Convert Markdown text into a complete HTML document.

    Markdown itself never causes an error; only the template can fail.

    Args:
        markdown: Markdown source text.
        template_text: Template source exposing ``Title`` and ``Content``.
            None selects the built-in HTML5 template; an empty string is a
            valid template that renders nothing.
        title: Document title; the default title is used when empty.
        config: Configuration controlling code block rendering. Defaults to a
            new `Md2HtmlConfig` when omitted.

    Returns:
        str: The rendered document.

    Raises:
        TemplateParseError: If the template has invalid syntax.
        TemplateExecutionError: If the template cannot be rendered.

    Examples:
        convert("# Hello", "<h1>{{ Title }}</h1>{{ Content }}", "Greeting")
    """
    if template_text is None:
        template_text = DEFAULT_TEMPLATE

    body = generate_html_body(markdown, config)
    return render_template(body, title, template_text)


class ConvertFileError(Exception):
    """Raised when converting a Markdown file fails."""


def convert_file(
    filepath: Path,
    template_path: Path | None = None,
    title: str = "",
    config: Md2HtmlConfig | None = None,
) -> str:
    """Read a Markdown file (and optional template file) and convert it.

    Args:
        filepath: Path to the Markdown file.
        template_path: Path to a template file. Falls back to `config.template`,
            then to the built-in template.
        title: Document title. Falls back to `config.title`, then to the
            default title.
        config: Configuration controlling size limits and rendering; defaults
            to a new `Md2HtmlConfig` when omitted.

    Returns:
        str: The rendered document.

    Raises:
        ConvertFileError: If configuration is invalid, a file cannot be read
            or decoded, or the template fails to parse or render.

    Examples:
        document = convert_file(Path("README.md"), Path("page.html"), "Readme")
    """
    config = config or Md2HtmlConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ConvertFileError(str(error)) from error

    if template_path is None and config.template is not None:
        template_path = Path(config.template)
    title = title or config.title

    try:
        markdown = read_text_file(filepath, config.max_file_size)
        template_text = (
            read_text_file(template_path, config.max_file_size)
            if template_path is not None
            else None
        )
    except IOError as error:
        raise ConvertFileError(str(error)) from error

    try:
        return convert(markdown, template_text, title, config)
    except TemplateError as error:
        raise ConvertFileError(str(error)) from error
