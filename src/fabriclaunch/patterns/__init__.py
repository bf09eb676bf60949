"""Pattern repository loading."""

from __future__ import annotations

from .discovery import find_pattern, load_patterns

__all__ = ["find_pattern", "load_patterns"]
