"""
md2html: convert a small Markdown subset into HTML documents.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md2html -i README.md -o README.html --title "Read me"

Library Usage:
    from md2html import convert, generate_html_body

    body = generate_html_body("# Title\\n\\n- item")
    document = convert("# Title", "<h1>{{ Title }}</h1>{{ Content }}", "Notes")
"""

from .assembler import generate_html_body
from .classifier import classify_line, indentation_depth
from .config import ConfigError, Md2HtmlConfig
from .constants import DEFAULT_TEMPLATE, DEFAULT_TITLE
from .converter import ConvertFileError, convert, convert_file
from .escaping import escape_html
from .exceptions import TemplateError, TemplateExecutionError, TemplateParseError
from .inline import render_inline
from .models import LineClassification, LineKind, TemplateData
from .renderer import render_template

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert",
    "convert_file",
    "generate_html_body",
    "render_inline",
    "render_template",
    "classify_line",
    "escape_html",
    # Data models
    "LineClassification",
    "LineKind",
    "TemplateData",
    "Md2HtmlConfig",
    # Utilities
    "indentation_depth",
    "DEFAULT_TEMPLATE",
    "DEFAULT_TITLE",
    # Exceptions
    "ConfigError",
    "ConvertFileError",
    "TemplateError",
    "TemplateExecutionError",
    "TemplateParseError",
    # Version
    "__version__",
]
