"""Shared type aliases for fabriclaunch."""

from .common import ExecutablePath

__all__ = ["ExecutablePath"]
