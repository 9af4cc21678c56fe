"""Configuration loading and management."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_CODE_BLOCK_CLASS, DEFAULT_MAX_FILE_SIZE

_CSS_CLASS_PATTERN = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass
class Md2HtmlConfig:
    """Configuration for converting Markdown documents to HTML.

    Attributes:
        title: Document title; the default title is used when empty.
        template: Path to a page template, or None for the built-in template.
            Relative paths are resolved against the configuration file's
            directory when loaded from a file.
        code_block_class: CSS class of the ``<section>`` wrapping code blocks.
        max_file_size: Maximum input or template size in bytes.

    Examples:
        Md2HtmlConfig(title="Release notes", code_block_class="source-code")
    """

    title: str = ""
    template: str | None = None
    code_block_class: str = DEFAULT_CODE_BLOCK_CLASS
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


def load_config(search_path: Path) -> Md2HtmlConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.md2html]`` table from `pyproject.toml` and the ``[md2html]`` or
    ``[tool.md2html]`` table from `.md2html.toml` when present. Returns
    default values when no configuration is found. TOML files that cannot be
    read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        Md2HtmlConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "md2html")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".md2html.toml",
            table_paths=[("md2html",), ("tool", "md2html")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return Md2HtmlConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> Md2HtmlConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> Md2HtmlConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return Md2HtmlConfig()

    try:
        config = Md2HtmlConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error

    if isinstance(config.template, str) and config.template:
        template_path = Path(config.template).expanduser()
        if not template_path.is_absolute():
            template_path = config_file.parent / template_path
        config = replace(config, template=str(template_path))

    return config


def validate_config(config: Md2HtmlConfig) -> None:
    """Validate a `Md2HtmlConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a field has the wrong type, the CSS class is not a
            valid class name, or the size limit is not a positive integer.

    Examples:
        validate_config(Md2HtmlConfig(code_block_class="code"))
    """
    if not isinstance(config.title, str):
        raise ConfigError("`title` must be a string")
    if config.template is not None and (
        not isinstance(config.template, str) or not config.template
    ):
        raise ConfigError("`template` must be a non-empty path")
    if not isinstance(config.code_block_class, str) or not _CSS_CLASS_PATTERN.match(
        config.code_block_class
    ):
        raise ConfigError("`code_block_class` must be a valid CSS class name")

    _ensure_integers({"max_file_size": config.max_file_size})
    _ensure_positive({"max_file_size": config.max_file_size})


def apply_overrides(config: Md2HtmlConfig, **overrides: object) -> Md2HtmlConfig:
    """Apply override values to a `Md2HtmlConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        Md2HtmlConfig: New configuration with the provided overrides applied.
        The original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `Md2HtmlConfig`.

    Examples:
        updated = apply_overrides(config, title="Changelog", template=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> Md2HtmlConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        Md2HtmlConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), title="Guide", code_block_class="src")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
