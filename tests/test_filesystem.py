from __future__ import annotations

import os
from pathlib import Path

import pytest

from md2html.filesystem import (
    MAX_FILE_SIZE_ENV_VAR,
    get_max_file_size,
    read_text_file,
    write_output,
    write_preview_file,
)


def test_get_max_file_size_uses_default(monkeypatch):
    monkeypatch.delenv(MAX_FILE_SIZE_ENV_VAR, raising=False)

    assert get_max_file_size(default=1234) == 1234


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "2048")

    assert get_max_file_size(default=1234) == 2048


@pytest.mark.parametrize("value", ["abc", "1.5", ""])
def test_get_max_file_size_rejects_non_integers(monkeypatch, value: str):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, value)

    with pytest.raises(ValueError, match="Invalid value"):
        get_max_file_size()


@pytest.mark.parametrize("value", ["0", "-5"])
def test_get_max_file_size_rejects_non_positive(monkeypatch, value: str):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, value)

    with pytest.raises(ValueError, match="positive integer"):
        get_max_file_size()


def test_read_text_file_preserves_line_endings(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_bytes(b"# A\r\nB\n")

    assert read_text_file(target) == "# A\r\nB\n"


def test_read_text_file_missing(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        read_text_file(tmp_path / "missing.md")


def test_read_text_file_rejects_directories(tmp_path: Path):
    with pytest.raises(IOError, match="not a regular file"):
        read_text_file(tmp_path)


def test_read_text_file_enforces_size(tmp_path: Path):
    target = tmp_path / "big.md"
    target.write_text("x" * 100, encoding="utf-8")

    with pytest.raises(IOError, match="maximum allowed size of 10 bytes"):
        read_text_file(target, max_size=10)


def test_read_text_file_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "bad.md"
    target.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(IOError, match="Invalid UTF-8"):
        read_text_file(target)


def test_write_output_writes_and_replaces(tmp_path: Path):
    target = tmp_path / "out.html"
    target.write_text("old", encoding="utf-8")

    write_output(target, "<p>new</p>\n")

    assert target.read_text(encoding="utf-8") == "<p>new</p>\n"
    assert [path.name for path in tmp_path.iterdir()] == ["out.html"]
    assert target.stat().st_mode & 0o777 == 0o644


def test_write_output_requires_existing_directory(tmp_path: Path):
    with pytest.raises(IOError, match="does not exist"):
        write_output(tmp_path / "missing" / "out.html", "x")


def test_write_output_cleans_up_on_failure(tmp_path: Path, monkeypatch):
    target = tmp_path / "out.html"

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(IOError, match="Error writing"):
        write_output(target, "x")
    assert list(tmp_path.iterdir()) == []


def test_write_preview_file_creates_html_file():
    path = write_preview_file("<p>preview</p>")
    try:
        assert path.name.startswith("md2html-")
        assert path.suffix == ".html"
        assert path.read_text(encoding="utf-8") == "<p>preview</p>"
    finally:
        path.unlink()
