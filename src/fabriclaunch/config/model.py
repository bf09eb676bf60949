"""Config data model for fabriclaunch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fabriclaunch.constants.config import DEFAULT_PATTERNS_DIR
from fabriclaunch.constants.discovery import DEFAULT_DESCRIPTION_MAX_LENGTH, PATTERN_DESCRIPTOR_FILENAME
from fabriclaunch.constants.invocation import DEFAULT_TIMEOUT_SECONDS
from fabriclaunch.constants.resolver import DEFAULT_CANDIDATE_PATHS, DEFAULT_LOOKUP_SHELL, FABRIC_COMMAND_NAME


@dataclass(frozen=True)
class FabricLaunchConfig:
    """Resolved launcher config."""

    patterns_dir: Path = Path(DEFAULT_PATTERNS_DIR).expanduser()
    command_name: str = FABRIC_COMMAND_NAME
    candidate_paths: tuple[Path, ...] = tuple(Path(path).expanduser() for path in DEFAULT_CANDIDATE_PATHS)
    shell: str = DEFAULT_LOOKUP_SHELL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    descriptor_filename: str = PATTERN_DESCRIPTOR_FILENAME
    description_max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH
