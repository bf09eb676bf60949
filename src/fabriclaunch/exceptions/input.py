"""Exceptions for acquiring pattern input text."""

from __future__ import annotations

from fabriclaunch.exceptions.base import FabricLaunchError


class EmptyInputError(FabricLaunchError, ValueError):
    """Raised when input text is empty after trimming."""


class ClipboardError(FabricLaunchError):
    """Raised when the system clipboard cannot be read or written."""
