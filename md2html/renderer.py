"""Page template rendering."""

from __future__ import annotations

import re
from dataclasses import asdict

from jinja2 import StrictUndefined, TemplateError as JinjaTemplateError
from jinja2 import TemplateSyntaxError
from jinja2.sandbox import SandboxedEnvironment

from .constants import DEFAULT_TEMPLATE, DEFAULT_TITLE
from .exceptions import TemplateExecutionError, TemplateParseError
from .models import TemplateData

# "{{ .Title }}" is accepted as a spelling of "{{ Title }}"
_DOT_FIELD_PATTERN = re.compile(r"(\{\{-?\s*)\.(?=[A-Za-z_])")

# Templates are user supplied; the sandbox blocks access to private attributes
_ENVIRONMENT = SandboxedEnvironment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def normalize_template_text(template_text: str) -> str:
    """Rewrite leading-dot field references to plain template variables.

    Examples:
        normalize_template_text("<title>{{ .Title }}</title>")
        # "<title>{{ Title }}</title>"
    """
    return _DOT_FIELD_PATTERN.sub(r"\1", template_text)


def render_template(
    body_html: str, title: str = "", template_text: str = DEFAULT_TEMPLATE
) -> str:
    """Substitute a title and an HTML body into a page template.

    The template exposes two fields, ``Title`` and ``Content``. Values are
    inserted without escaping since the body is already HTML. An empty
    template is valid and renders to an empty string.

    Args:
        body_html: Rendered HTML body.
        title: Document title; `DEFAULT_TITLE` is used when empty.
        template_text: Template source.

    Returns:
        str: The rendered document.

    Raises:
        TemplateParseError: If `template_text` is not valid template syntax.
        TemplateExecutionError: If rendering fails, for example because the
            template references an unknown field.

    Examples:
        render_template("<p>Hi</p>", "Greeting", "<h1>{{ Title }}</h1>{{ Content }}")
    """
    try:
        template = _ENVIRONMENT.from_string(normalize_template_text(template_text))
    except TemplateSyntaxError as error:
        raise TemplateParseError(error) from error

    data = TemplateData(Title=title or DEFAULT_TITLE, Content=body_html)

    try:
        return template.render(**asdict(data))
    except (JinjaTemplateError, TypeError, ValueError) as error:
        raise TemplateExecutionError(error) from error
