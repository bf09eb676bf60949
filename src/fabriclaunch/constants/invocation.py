"""Constants for running a pattern through the fabric executable."""

from __future__ import annotations

PATTERN_FLAG: str = "--pattern"
# LLM-backed patterns can take minutes to answer.
DEFAULT_TIMEOUT_SECONDS: float = 300.0
STDIO_ENCODING: str = "utf-8"
