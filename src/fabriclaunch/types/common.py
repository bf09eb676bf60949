"""Cross-module type aliases."""

from __future__ import annotations

from typing import TypeAlias

# A path that existed and was executable when it was resolved; not re-checked later.
ExecutablePath: TypeAlias = str
