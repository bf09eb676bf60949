"""Tests for descriptor summary extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from fabriclaunch.parsers import extract_description, read_pattern_description


def test_skips_headings_and_blank_lines() -> None:
    text = "# Title\n\nThis is the summary.\nMore text."

    assert extract_description(text) == "This is the summary."


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        pytest.param("   indented line   \n", "indented line", id="trims-whitespace"),
        pytest.param("## IDENTITY\n   \n\t\n# PURPOSE\nYou are an expert.", "You are an expert.", id="many-headings"),
        pytest.param("    # still a heading\nbody", "body", id="heading-after-trim"),
        pytest.param("windows line\r\nsecond\r\n", "windows line", id="crlf"),
        pytest.param("foo\x0bbar\x0cbaz\nnext", "foo\x0bbar\x0cbaz", id="only-newline-splits"),
        pytest.param("one\u2028two\x85three", "one\u2028two\x85three", id="unicode-separators-kept"),
    ],
)
def test_first_prose_line(text: str, expected: str) -> None:
    assert extract_description(text) == expected


@pytest.mark.parametrize("text", ["", "\n\n   \n", "# Only\n## Headings\n"], ids=["empty", "blank", "headings"])
def test_no_prose_line_yields_none(text: str) -> None:
    assert extract_description(text) is None


def test_truncates_to_max_length() -> None:
    text = "x" * 150 + "\nnext line"

    description = extract_description(text)

    assert description == "x" * 100
    assert len(description) == 100


def test_custom_max_length() -> None:
    assert extract_description("abcdefgh", max_length=3) == "abc"


def test_read_pattern_description_strips_bom(tmp_path: Path) -> None:
    (tmp_path / "system.md").write_text("\ufeffSummary after BOM\n", encoding="utf-8")

    assert read_pattern_description(tmp_path) == "Summary after BOM"


def test_read_pattern_description_missing_file(tmp_path: Path) -> None:
    assert read_pattern_description(tmp_path) is None


def test_read_pattern_description_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / "system.md").write_bytes(b"\xff\xfe\xfa not utf-8 \x80")

    assert read_pattern_description(tmp_path) is None


def test_read_pattern_description_descriptor_is_directory(tmp_path: Path) -> None:
    (tmp_path / "system.md").mkdir()

    assert read_pattern_description(tmp_path) is None


def test_read_pattern_description_custom_filename(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Readme\nCustom summary\n", encoding="utf-8")

    assert read_pattern_description(tmp_path, descriptor_filename="README.md") == "Custom summary"
