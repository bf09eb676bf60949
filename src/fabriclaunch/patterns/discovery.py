"""Pattern repository discovery."""

from __future__ import annotations

import locale
import logging
from pathlib import Path

from fabriclaunch.constants.discovery import (
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    HIDDEN_ENTRY_PREFIX,
    PATTERN_DESCRIPTOR_FILENAME,
)
from fabriclaunch.exceptions import PatternLoadError
from fabriclaunch.model import Pattern
from fabriclaunch.parsers import read_pattern_description

logger = logging.getLogger(__name__)


def load_patterns(
    patterns_dir: Path,
    *,
    descriptor_filename: str = PATTERN_DESCRIPTOR_FILENAME,
    max_description_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH,
) -> list[Pattern]:
    """Load one Pattern per non-hidden subdirectory of *patterns_dir*.

    Raises ``PatternLoadError`` when the directory itself cannot be listed.
    A pattern whose descriptor cannot be read is kept without a description.
    """
    try:
        entries = list(patterns_dir.iterdir())
    except OSError as exc:
        raise PatternLoadError(f"Failed to load patterns: {exc}") from exc

    patterns: list[Pattern] = []
    for entry in entries:
        if not _is_pattern_dir(entry):
            continue
        description = read_pattern_description(
            entry,
            descriptor_filename=descriptor_filename,
            max_length=max_description_length,
        )
        patterns.append(Pattern(name=entry.name, description=description))

    logger.debug("Loaded %d pattern(s) from %s", len(patterns), patterns_dir)
    return sorted(patterns, key=_pattern_sort_key)


def find_pattern(patterns: list[Pattern], name: str) -> Pattern | None:
    """Return the pattern called *name*, if present."""
    for pattern in patterns:
        if pattern.name == name:
            return pattern
    return None


def _is_pattern_dir(entry: Path) -> bool:
    if entry.name.startswith(HIDDEN_ENTRY_PREFIX):
        return False
    try:
        return entry.is_dir() and not entry.is_symlink()
    except OSError:
        return False


def _pattern_sort_key(pattern: Pattern) -> tuple[str, str]:
    """Collate by the active locale, falling back to code points on ties."""
    return locale.strxfrm(pattern.name), pattern.name
