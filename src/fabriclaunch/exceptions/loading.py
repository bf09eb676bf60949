"""Pattern repository exceptions."""

from __future__ import annotations

from fabriclaunch.exceptions.base import FabricLaunchError


class PatternLoadError(FabricLaunchError):
    """Raised when the patterns directory cannot be listed."""
