"""Constants for pattern directory discovery and descriptor parsing."""

from __future__ import annotations

PATTERN_DESCRIPTOR_FILENAME: str = "system.md"
HIDDEN_ENTRY_PREFIX: str = "."
HEADING_MARKER: str = "#"
DEFAULT_DESCRIPTION_MAX_LENGTH: int = 100
