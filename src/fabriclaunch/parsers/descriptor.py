"""Parser for pattern descriptor files (``system.md``)."""

from __future__ import annotations

from pathlib import Path

from fabriclaunch.constants.discovery import (
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    HEADING_MARKER,
    PATTERN_DESCRIPTOR_FILENAME,
)
from fabriclaunch.io.files import read_text_or_none


def extract_description(text: str, max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH) -> str | None:
    """Return the first non-blank, non-heading line of *text*, truncated to *max_length*."""
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped and not stripped.startswith(HEADING_MARKER):
            return stripped[:max_length]
    return None


def read_pattern_description(
    pattern_dir: Path,
    *,
    descriptor_filename: str = PATTERN_DESCRIPTOR_FILENAME,
    max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH,
) -> str | None:
    """Read a pattern's descriptor file and extract its summary line.

    Unreadable descriptors (missing, permission denied, undecodable) yield
    ``None`` so the pattern is still listed without a description.
    """
    text = read_text_or_none(pattern_dir / descriptor_filename)
    if text is None:
        return None
    return extract_description(text.lstrip("\ufeff"), max_length)
