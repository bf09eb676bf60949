"""Shared pytest fixtures for pattern repositories and stub executables."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def patterns_dir(tmp_path: Path) -> Path:
    """Return an empty fabric patterns directory."""
    root = tmp_path / "patterns"
    root.mkdir()
    return root


@pytest.fixture
def make_pattern(patterns_dir: Path) -> Callable[..., Path]:
    """Create a pattern directory, optionally with a ``system.md`` descriptor."""

    def _make(name: str, descriptor: str | None = None) -> Path:
        pattern_dir = patterns_dir / name
        pattern_dir.mkdir()
        if descriptor is not None:
            (pattern_dir / "system.md").write_text(descriptor, encoding="utf-8")
        return pattern_dir

    return _make


@pytest.fixture
def make_stub(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an executable ``/bin/sh`` script standing in for fabric."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _make(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(0o755)
        return script

    return _make
