"""Pattern invocation."""

from __future__ import annotations

from .invocation import build_command, require_input_text, run_pattern

__all__ = ["build_command", "require_input_text", "run_pattern"]
