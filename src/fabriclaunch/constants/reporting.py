"""Constants for stdout formatting."""

from __future__ import annotations

NAME_COLUMN_MAX_WIDTH: int = 40

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_CYAN: str = "\033[36m"
ANSI_DIM: str = "\033[2m"
