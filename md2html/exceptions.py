"""Package-specific exception types."""

from __future__ import annotations


class TemplateError(ValueError):
    """Base class for template-related errors.

    Args:
        message: Human-readable description of the failure.
        original: Underlying exception raised by the template engine, if any.
    """

    def __init__(self, message: str, original: BaseException | None = None):
        self.original = original
        super().__init__(message)


class TemplateParseError(TemplateError):
    """Raised when template text is not valid template syntax.

    Args:
        original: Syntax error reported by the template engine.
    """

    def __init__(self, original: BaseException):
        super().__init__(f"error parsing template: {original}", original)


class TemplateExecutionError(TemplateError):
    """Raised when substituting values into a parsed template fails.

    Args:
        original: Error raised while rendering, such as an unknown field.
    """

    def __init__(self, original: BaseException):
        super().__init__(f"error executing template: {original}", original)
