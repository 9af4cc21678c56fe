"""Filesystem helpers for md2html."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "MD2HTML_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MD2HTML_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a regular file.

    Args:
        filepath: Path to the file.

    Returns:
        os.stat_result: File metadata.

    Raises:
        IOError: If the path is inaccessible or not a regular file.

    Examples:
        stat_result = collect_file_stat(Path("README.md"))
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading with consistent error handling.

    Args:
        filepath: Path to the file.

    Returns:
        TextIO: File handle opened for reading in UTF-8.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("README.md")) as handle:
            first_line = handle.readline()
    """
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error


def read_text_file(filepath: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a UTF-8 text file after checking its type and size.

    Args:
        filepath: Path to the file.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: File content with line endings left untouched.

    Raises:
        IOError: If the file is missing, not a regular file, too large, or not
            valid UTF-8.

    Examples:
        markdown = read_text_file(Path("README.md"), max_size=1_048_576)
    """
    stat_result = collect_file_stat(filepath)
    enforce_file_size(stat_result, max_size, filepath)

    try:
        with safe_read(filepath) as file:
            return file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise IOError(error_message) from error


def write_output(filepath: Path, content: str):
    """Write `content` to `filepath` atomically.

    The document is written to a temporary file in the target directory,
    flushed to disk, and moved over the destination.

    Args:
        filepath: Destination path.
        content: Text to write, encoded as UTF-8.

    Returns:
        None.

    Raises:
        IOError: If the destination directory is missing or the file cannot be
            written or replaced.

    Examples:
        write_output(Path("out/index.html"), document)
    """
    directory = filepath.parent
    if not directory.is_dir():
        error_message = f"Error writing {filepath}: directory {directory} does not exist."
        raise IOError(error_message)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", newline="", delete=False, dir=directory, suffix=".tmp"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            os.chmod(tmp_file.name, 0o644)

        os.replace(temp_path, filepath)
    except OSError as error:
        error_message = f"Error writing {filepath}: {error}"
        raise IOError(error_message) from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass


def write_preview_file(content: str) -> Path:
    """Write a document to a new temporary ``.html`` file for previewing.

    The file is left in place so a browser can load it after this returns.

    Returns:
        Path: Location of the temporary file.

    Raises:
        IOError: If the temporary file cannot be created or written.
    """
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", newline="", delete=False, prefix="md2html-", suffix=".html"
        ) as tmp_file:
            tmp_file.write(content)
            return Path(tmp_file.name)
    except OSError as error:
        error_message = f"Error writing preview file: {error}"
        raise IOError(error_message) from error
