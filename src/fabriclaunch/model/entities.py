"""Frozen dataclasses shared across the launcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pattern:
    """A prompt-template directory found in the patterns repository."""

    name: str
    description: str | None = None
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of one run of the fabric executable."""

    success: bool
    output: str
    error: str | None = None
    pattern: str = ""
    input_length: int = 0

    @property
    def message(self) -> str:
        """Text to show or copy: the output on success, the error otherwise."""
        if self.success:
            return self.output
        return self.error or ""
