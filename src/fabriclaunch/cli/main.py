"""CLI entrypoint for fabriclaunch."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import locale
import logging
import sys
from pathlib import Path

from fabriclaunch import __version__
from fabriclaunch.cli.handlers import handle_list, handle_run, handle_which
from fabriclaunch.config import FabricLaunchConfig, load_config
from fabriclaunch.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from fabriclaunch.exceptions import ConfigError
from fabriclaunch.reporting import StdoutReporter

logger = logging.getLogger(__name__)


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=None, help="Explicit config file")
    common.add_argument("--patterns-dir", type=Path, default=None, help="Override the fabric patterns directory")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", parents=[common], help="List installed fabric patterns")
    list_cmd.add_argument("-s", "--search", default=None, help="Only show patterns whose name or description match")

    run_cmd = subparsers.add_parser("run", parents=[common], help="Run a pattern over clipboard text")
    run_cmd.add_argument("pattern", help="Pattern name (a directory in the patterns folder)")
    run_cmd.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Read input from this file instead of the clipboard ('-' for stdin)",
    )
    run_cmd.add_argument("-c", "--copy", action="store_true", help="Copy the result (or error) to the clipboard")
    run_cmd.add_argument(
        "-t",
        "--timeout",
        type=_positive_float,
        default=None,
        help="Seconds to wait for fabric before giving up (default: 300)",
    )

    subparsers.add_parser("which", parents=[common], help="Show which fabric executable would be used")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    _use_user_collation()

    try:
        config = _apply_overrides(load_config(args.config), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    reporter = StdoutReporter(color=not args.no_color and sys.stdout.isatty())

    if args.command == "list":
        return handle_list(args, config, reporter)
    if args.command == "which":
        return handle_which(config, reporter)
    if args.command == "run":
        return asyncio.run(handle_run(args, config, reporter))

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _apply_overrides(config: FabricLaunchConfig, args: argparse.Namespace) -> FabricLaunchConfig:
    """Layer command-line flags over file configuration."""
    overrides: dict[str, object] = {}
    if args.patterns_dir is not None:
        overrides["patterns_dir"] = args.patterns_dir.expanduser()
    if getattr(args, "timeout", None) is not None:
        overrides["timeout_seconds"] = args.timeout
    return dataclasses.replace(config, **overrides) if overrides else config


def _use_user_collation() -> None:
    """Sort pattern names with the user's locale rules when that locale is available."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Falling back to default collation: %s", exc)


if __name__ == "__main__":
    raise SystemExit(main())
