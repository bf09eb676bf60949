"""Base exception for fabriclaunch."""

from __future__ import annotations


class FabricLaunchError(Exception):
    """Root of all errors raised by fabriclaunch."""
