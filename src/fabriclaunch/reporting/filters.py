"""Search filtering for pattern listings."""

from __future__ import annotations

from collections.abc import Sequence

from fabriclaunch.model import Pattern


def pattern_matches(pattern: Pattern, query: str) -> bool:
    """Return whether *query* occurs in the pattern name or description, ignoring case."""
    needle = query.strip().casefold()
    if not needle:
        return True
    if needle in pattern.name.casefold():
        return True
    return pattern.description is not None and needle in pattern.description.casefold()


def filter_patterns(patterns: Sequence[Pattern], query: str | None) -> list[Pattern]:
    """Return patterns matching *query*, preserving order; everything when no query is given."""
    if query is None:
        return list(patterns)
    return [pattern for pattern in patterns if pattern_matches(pattern, query)]
