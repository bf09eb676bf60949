"""Human-readable stdout rendering for pattern listings and run results."""

from __future__ import annotations

from collections.abc import Sequence

from fabriclaunch.constants.branding import FABRIC_INSTALL_URL, NO_OUTPUT_PLACEHOLDER, NOT_FOUND_MESSAGE
from fabriclaunch.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_RED,
    ANSI_RESET,
    NAME_COLUMN_MAX_WIDTH,
)
from fabriclaunch.model import InvocationResult, Pattern


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats launcher output for the terminal."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def render_patterns(self, patterns: Sequence[Pattern]) -> str:
        """Render one line per pattern: name, then description when known."""
        if not patterns:
            return ""
        width = min(max(len(p.name) for p in patterns), NAME_COLUMN_MAX_WIDTH)
        lines: list[str] = []
        for pattern in patterns:
            if not pattern.description:
                lines.append(self._paint(pattern.name, ANSI_CYAN))
                continue
            name = self._paint(pattern.name.ljust(width), ANSI_CYAN)
            lines.append(f"{name}  {self._paint(pattern.description, ANSI_DIM)}")
        return "\n".join(lines)

    def render_result(self, result: InvocationResult) -> str:
        """Render a successful run as a markdown document headed by the pattern name."""
        heading = self._paint(f"# {result.pattern}", ANSI_BOLD)
        return f"{heading}\n\n{result.output or NO_OUTPUT_PLACEHOLDER}"

    def render_error(self, result: InvocationResult) -> str:
        """Render a failed run with the raw error, pattern and input length."""
        heading = self._paint("# Error Running Pattern", ANSI_RED)
        return "\n".join(
            (
                heading,
                "",
                "```",
                result.error or "",
                "```",
                "",
                "## Pattern",
                result.pattern,
                "",
                "## Input Length",
                f"{result.input_length} characters",
            )
        )

    def render_not_found(self) -> str:
        """Render the install hint shown when no fabric executable is available."""
        heading = self._paint("# Error", ANSI_RED)
        return f"{heading}\n\n{NOT_FOUND_MESSAGE}\nInstall fabric: {FABRIC_INSTALL_URL}"
