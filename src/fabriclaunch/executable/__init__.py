"""Executable resolution."""

from __future__ import annotations

from .resolver import lookup_in_login_shell, resolve_executable

__all__ = ["lookup_in_login_shell", "resolve_executable"]
