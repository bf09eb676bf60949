"""Run a pattern by piping text through the fabric executable."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from contextlib import suppress

from fabriclaunch.constants.invocation import DEFAULT_TIMEOUT_SECONDS, PATTERN_FLAG, STDIO_ENCODING
from fabriclaunch.exceptions import EmptyInputError
from fabriclaunch.model import InvocationResult
from fabriclaunch.types import ExecutablePath

logger = logging.getLogger(__name__)


def require_input_text(text: str | None) -> str:
    """Return *text* unchanged, raising EmptyInputError when it is blank."""
    if text is None or not text.strip():
        raise EmptyInputError("Input text is empty. Copy some text to your clipboard first.")
    return text


def build_command(executable: ExecutablePath, pattern_name: str) -> list[str]:
    """Build the argument vector for one pattern run."""
    return [executable, PATTERN_FLAG, pattern_name]


async def run_pattern(
    executable: ExecutablePath,
    pattern_name: str,
    input_text: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> InvocationResult:
    """Feed *input_text* to ``<executable> --pattern <pattern_name>`` and collect stdout.

    Non-zero exits, spawn failures and timeouts come back as a failed
    ``InvocationResult``; nothing is retried.
    """
    cmd = build_command(executable, pattern_name)
    input_length = len(input_text)
    logger.info("Running pattern %s on %d characters", pattern_name, input_length)

    def failure(error: str) -> InvocationResult:
        return InvocationResult(
            success=False,
            output="",
            error=error,
            pattern=pattern_name,
            input_length=input_length,
        )

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("Could not start %s: %s", executable, exc)
        return failure(f"Could not start {executable}: {exc}")

    try:
        stdout, stderr = await asyncio.wait_for(
            proc.communicate(input=input_text.encode(STDIO_ENCODING)),
            timeout=timeout_seconds,
        )
    except TimeoutError:
        _kill_process_group(proc)
        await proc.wait()
        logger.warning("Pattern %s timed out after %ss", pattern_name, timeout_seconds)
        return failure(f"Command timed out after {timeout_seconds:g} seconds")

    if proc.returncode != 0:
        detail = stderr.decode(STDIO_ENCODING, errors="replace").strip()
        message = f"Command failed with exit code {proc.returncode}"
        if detail:
            message = f"{message}: {detail}"
        logger.warning("Pattern %s failed with exit code %s", pattern_name, proc.returncode)
        return failure(message)

    return InvocationResult(
        success=True,
        output=stdout.decode(STDIO_ENCODING, errors="replace"),
        pattern=pattern_name,
        input_length=input_length,
    )


def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    """Kill the run's whole session so children holding the output pipes die with it."""
    try:
        os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
    except (ProcessLookupError, PermissionError):
        with suppress(ProcessLookupError):
            proc.kill()
