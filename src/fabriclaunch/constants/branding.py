"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "fabriclaunch"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ fabriclaunch",
        "     // run fabric patterns on clipboard text",
    )
)
FABRIC_INSTALL_URL: str = "https://github.com/danielmiessler/fabric"
NOT_FOUND_MESSAGE: str = "Fabric command not found. Please install fabric first."
NO_OUTPUT_PLACEHOLDER: str = "No output"
