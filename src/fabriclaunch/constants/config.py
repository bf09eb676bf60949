"""Configuration defaults and filenames."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME: str = "config.yaml"
DEFAULT_CONFIG_DIR: Path = Path("~/.config/fabriclaunch")
DEFAULT_PATTERNS_DIR: str = "~/.config/fabric/patterns"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "patterns_dir",
        "command_name",
        "candidate_paths",
        "shell",
        "timeout_seconds",
        "descriptor_filename",
        "description_max_length",
    }
)
