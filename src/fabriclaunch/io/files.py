"""Filesystem probing and text-reading helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def is_executable_file(path: Path) -> bool:
    """Return True if *path* is an existing file the current user may execute."""
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


def read_text_or_none(path: Path) -> str | None:
    """Read *path* as UTF-8 text, returning None on any read or decode failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
