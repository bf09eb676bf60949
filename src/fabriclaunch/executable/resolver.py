"""Locate the fabric executable on the local machine."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Iterable
from pathlib import Path

from fabriclaunch.constants.resolver import (
    DEFAULT_LOOKUP_SHELL,
    FABRIC_COMMAND_NAME,
    SHELL_LOOKUP_COMMAND,
    SHELL_LOOKUP_TIMEOUT_SECONDS,
)
from fabriclaunch.io.files import is_executable_file
from fabriclaunch.types import ExecutablePath

logger = logging.getLogger(__name__)


def resolve_executable(
    candidate_paths: Iterable[Path],
    command_name: str = FABRIC_COMMAND_NAME,
    *,
    shell: str = DEFAULT_LOOKUP_SHELL,
) -> ExecutablePath | None:
    """Return the first executable candidate, else ask a login shell for *command_name*.

    A missing executable is a normal outcome and yields ``None``.
    """
    for candidate in candidate_paths:
        if is_executable_file(candidate):
            logger.debug("Found %s at candidate path %s", command_name, candidate)
            return str(candidate)

    return lookup_in_login_shell(command_name, shell=shell)


def lookup_in_login_shell(command_name: str, *, shell: str = DEFAULT_LOOKUP_SHELL) -> ExecutablePath | None:
    """Resolve *command_name* through ``which`` in a login shell so profile PATH edits apply."""
    query = f"{SHELL_LOOKUP_COMMAND} {shlex.quote(command_name)}"
    try:
        completed = subprocess.run(
            [shell, "-lc", query],
            capture_output=True,
            text=True,
            timeout=SHELL_LOOKUP_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Shell lookup for %s failed: %s", command_name, exc)
        return None

    if completed.returncode != 0:
        logger.debug("Shell lookup for %s exited with %d", command_name, completed.returncode)
        return None

    resolved = completed.stdout.strip()
    if not resolved:
        return None
    logger.debug("Shell resolved %s to %s", command_name, resolved)
    return resolved
