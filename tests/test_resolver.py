"""Tests for locating the fabric executable."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fabriclaunch.executable import lookup_in_login_shell, resolve_executable


def _fake_run(
    *,
    stdout: str = "",
    returncode: int = 0,
    calls: list[list[str]] | None = None,
) -> Callable[..., subprocess.CompletedProcess[str]]:
    def _run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        if calls is not None:
            calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    return _run


def _raising_run(exc: BaseException) -> Callable[..., subprocess.CompletedProcess[str]]:
    def _run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise exc

    return _run


def test_first_executable_candidate_wins(
    tmp_path: Path, make_stub: Callable[[str, str], Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(subprocess, "run", _raising_run(AssertionError("shell lookup must not run")))
    not_executable = tmp_path / "plain"
    not_executable.write_text("#!/bin/sh\n", encoding="utf-8")
    not_executable.chmod(0o644)
    first = make_stub("fabric", "exit 0")
    second = make_stub("fabric-ai", "exit 0")

    resolved = resolve_executable([tmp_path / "missing", not_executable, first, second], "fabric")

    assert resolved == str(first)


def test_directory_candidate_is_not_executable(
    tmp_path: Path, make_stub: Callable[[str, str], Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(subprocess, "run", _raising_run(AssertionError("shell lookup must not run")))
    directory = tmp_path / "fabric-dir"
    directory.mkdir()
    stub = make_stub("fabric", "exit 0")

    assert resolve_executable([directory, stub], "fabric") == str(stub)


def test_falls_back_to_login_shell(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(subprocess, "run", _fake_run(stdout="  /opt/tools/fabric\n", calls=calls))

    resolved = resolve_executable([tmp_path / "nope"], "fabric", shell="bash")

    assert resolved == "/opt/tools/fabric"
    assert calls == [["bash", "-lc", "which fabric"]]


def test_shell_lookup_quotes_command_name(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(subprocess, "run", _fake_run(stdout="/x\n", calls=calls))

    lookup_in_login_shell("fab ric; rm -rf /", shell="zsh")

    assert calls == [["zsh", "-lc", "which 'fab ric; rm -rf /'"]]


@pytest.mark.parametrize(
    "fake",
    [
        pytest.param(_fake_run(stdout="", returncode=1), id="non-zero-exit"),
        pytest.param(_fake_run(stdout="   \n"), id="blank-output"),
        pytest.param(_raising_run(FileNotFoundError("bash")), id="shell-missing"),
        pytest.param(_raising_run(subprocess.TimeoutExpired(["bash"], 10)), id="timeout"),
    ],
)
def test_not_found_is_none(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    fake: Callable[..., subprocess.CompletedProcess[str]],
) -> None:
    monkeypatch.setattr(subprocess, "run", fake)

    assert resolve_executable([tmp_path / "missing"], "fabric") is None


def test_empty_candidate_list_uses_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", _fake_run(stdout="/usr/bin/fabric\n"))

    assert resolve_executable([], "fabric") == "/usr/bin/fabric"
