"""Configuration-related exceptions."""

from __future__ import annotations

from fabriclaunch.exceptions.base import FabricLaunchError


class ConfigError(FabricLaunchError, ValueError):
    """Raised when launcher configuration is invalid."""
