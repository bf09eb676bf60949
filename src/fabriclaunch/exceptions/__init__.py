"""Shared exception hierarchy for fabriclaunch."""

from __future__ import annotations

from .base import FabricLaunchError
from .config import ConfigError
from .input import ClipboardError, EmptyInputError
from .loading import PatternLoadError

__all__ = [
    "ClipboardError",
    "ConfigError",
    "EmptyInputError",
    "FabricLaunchError",
    "PatternLoadError",
]
