"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from fabriclaunch.config import FabricLaunchConfig
from fabriclaunch.exceptions import ClipboardError, EmptyInputError, PatternLoadError
from fabriclaunch.executable import resolve_executable
from fabriclaunch.io import copy_to_clipboard, read_clipboard_text
from fabriclaunch.model import Pattern
from fabriclaunch.patterns import find_pattern, load_patterns
from fabriclaunch.reporting import StdoutReporter, filter_patterns
from fabriclaunch.runner import require_input_text, run_pattern

STDIN_MARKER = "-"


def handle_list(args: argparse.Namespace, config: FabricLaunchConfig, reporter: StdoutReporter) -> int:
    """Print installed patterns, optionally narrowed by ``--search``."""
    patterns = _load_or_report(config)
    if patterns is None:
        return 2
    if not patterns:
        print(f"No fabric patterns found in {config.patterns_dir}", file=sys.stderr)
        return 1

    shown = filter_patterns(patterns, args.search)
    if not shown:
        print(f"No patterns match {args.search!r}.", file=sys.stderr)
        return 1

    print(reporter.render_patterns(shown))
    return 0


def handle_which(config: FabricLaunchConfig, reporter: StdoutReporter) -> int:
    """Print the resolved fabric executable path."""
    executable = resolve_executable(config.candidate_paths, config.command_name, shell=config.shell)
    if executable is None:
        print(reporter.render_not_found(), file=sys.stderr)
        return 1
    print(executable)
    return 0


async def handle_run(args: argparse.Namespace, config: FabricLaunchConfig, reporter: StdoutReporter) -> int:
    """Run one pattern over clipboard (or file) text and print the result."""
    executable = await asyncio.to_thread(
        resolve_executable,
        config.candidate_paths,
        config.command_name,
        shell=config.shell,
    )
    if executable is None:
        print(reporter.render_not_found(), file=sys.stderr)
        return 1

    patterns = await asyncio.to_thread(_load_or_report, config)
    if patterns is None:
        return 2
    if find_pattern(patterns, args.pattern) is None:
        print(f"Unknown pattern: {args.pattern} (not found in {config.patterns_dir})", file=sys.stderr)
        return 2

    try:
        input_text = require_input_text(await asyncio.to_thread(_read_input, args.input_file))
    except ClipboardError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read input file: {exc}", file=sys.stderr)
        return 2
    except EmptyInputError as exc:
        print(f"Empty input: {exc}", file=sys.stderr)
        return 1

    result = await run_pattern(executable, args.pattern, input_text, timeout_seconds=config.timeout_seconds)

    if args.copy:
        try:
            copy_to_clipboard(result.message)
        except ClipboardError as exc:
            print(str(exc), file=sys.stderr)

    if not result.success:
        print(reporter.render_error(result), file=sys.stderr)
        return 1

    print(reporter.render_result(result))
    return 0


def _load_or_report(config: FabricLaunchConfig) -> list[Pattern] | None:
    """Load patterns, printing the failure and returning None when the directory is unreadable."""
    try:
        return load_patterns(
            config.patterns_dir,
            descriptor_filename=config.descriptor_filename,
            max_description_length=config.description_max_length,
        )
    except PatternLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _read_input(input_file: Path | None) -> str:
    """Return the text to feed the pattern: a file, stdin for ``-``, else the clipboard."""
    if input_file is None:
        return read_clipboard_text()
    if str(input_file) == STDIN_MARKER:
        return sys.stdin.read()
    return input_file.read_text(encoding="utf-8")
