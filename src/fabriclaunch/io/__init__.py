"""Shared I/O helpers."""

from .clipboard import copy_to_clipboard, read_clipboard_text
from .files import is_executable_file, read_text_or_none

__all__ = ["copy_to_clipboard", "is_executable_file", "read_clipboard_text", "read_text_or_none"]
