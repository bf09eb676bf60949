"""Configuration loading for fabriclaunch."""

from __future__ import annotations

from fabriclaunch.config.loader import default_config_path, load_config
from fabriclaunch.config.model import FabricLaunchConfig

__all__ = ["FabricLaunchConfig", "default_config_path", "load_config"]
