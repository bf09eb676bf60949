"""Config loading and normalization for fabriclaunch."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from fabriclaunch.config.model import FabricLaunchConfig
from fabriclaunch.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME, DEFAULT_CONFIG_DIR
from fabriclaunch.exceptions import ConfigError

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Return the per-user config file location."""
    return DEFAULT_CONFIG_DIR.expanduser() / CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> FabricLaunchConfig:
    """Load and validate launcher config from the user config file or an explicit path."""
    path = config_path.expanduser().resolve() if config_path else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return FabricLaunchConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {_describe_unknown_keys(unknown)}")

    defaults = FabricLaunchConfig()

    timeout_seconds = raw.get("timeout_seconds", defaults.timeout_seconds)
    if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, (int, float)) or timeout_seconds <= 0:
        raise ConfigError("timeout_seconds must be a positive number")

    max_length = raw.get("description_max_length", defaults.description_max_length)
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
        raise ConfigError("description_max_length must be a positive integer")

    candidate_paths = defaults.candidate_paths
    if "candidate_paths" in raw:
        candidate_paths = tuple(
            Path(item).expanduser() for item in _ensure_string_list(raw["candidate_paths"], "candidate_paths")
        )

    patterns_dir = defaults.patterns_dir
    if "patterns_dir" in raw:
        patterns_dir = Path(_ensure_string(raw["patterns_dir"], "patterns_dir")).expanduser()

    return FabricLaunchConfig(
        patterns_dir=patterns_dir,
        command_name=_ensure_string(raw.get("command_name", defaults.command_name), "command_name"),
        candidate_paths=candidate_paths,
        shell=_ensure_string(raw.get("shell", defaults.shell), "shell"),
        timeout_seconds=float(timeout_seconds),
        descriptor_filename=_ensure_string(
            raw.get("descriptor_filename", defaults.descriptor_filename),
            "descriptor_filename",
        ),
        description_max_length=max_length,
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Return a non-blank string, raising ConfigError on type mismatch."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item for item in value if item.strip()]


def _describe_unknown_keys(keys: list[str]) -> str:
    """Render unknown keys, suggesting the closest allowed key for each."""
    described: list[str] = []
    for key in keys:
        matches = difflib.get_close_matches(key, sorted(CONFIG_ALLOWED_KEYS), n=1)
        described.append(f"{key} (did you mean {matches[0]!r}?)" if matches else key)
    return ", ".join(described)
