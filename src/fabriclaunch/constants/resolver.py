"""Constants for locating the fabric executable."""

from __future__ import annotations

FABRIC_COMMAND_NAME: str = "fabric"

# Probed in order before falling back to a login-shell lookup.
DEFAULT_CANDIDATE_PATHS: tuple[str, ...] = (
    "~/.local/bin/fabric",
    "~/go/bin/fabric",
    "/usr/local/bin/fabric-ai",
    "/opt/homebrew/bin/fabric-ai",
)

DEFAULT_LOOKUP_SHELL: str = "bash"
SHELL_LOOKUP_COMMAND: str = "which"
SHELL_LOOKUP_TIMEOUT_SECONDS: float = 10.0
