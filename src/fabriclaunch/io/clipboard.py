"""System clipboard access via pyperclip."""

from __future__ import annotations

import pyperclip

from fabriclaunch.exceptions import ClipboardError


def read_clipboard_text() -> str:
    """Return the current clipboard text (empty string when the clipboard holds none)."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Failed to read clipboard: {exc}") from exc
    return text or ""


def copy_to_clipboard(text: str) -> None:
    """Place *text* on the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Failed to write clipboard: {exc}") from exc
