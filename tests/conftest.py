#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for ToolGit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

SAMPLE_SCRIPT = """#!/usr/bin/env bash
# ToolGit sample helpers

gh_help() {
    echo "usage"
}

gh_status() {
    git status --short "$@"
}

  gh_log()   {
    git log --oneline -n "${1:-10}"
}

gh_not_a_function
other_function() {
    :
}
"""


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def isolate_foundation_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restore FOUNDATION_SETUP_LOG_LEVEL after tests that run the CLI."""
    monkeypatch.setenv("FOUNDATION_SETUP_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("TOOLGIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOOLGIT_SETUP_LOG_LEVEL", raising=False)


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user's home directory at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from a checkout-like directory with an empty bin/ folder."""
    work = tmp_path / "work"
    (work / "bin").mkdir(parents=True)
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def write_script(workdir: Path) -> Callable[[str | bytes], Path]:
    """Return a writer for ./bin/git_helpers.sh in the working directory."""

    def _write(content: str | bytes) -> Path:
        script = workdir / "bin" / "git_helpers.sh"
        if isinstance(content, str):
            content = content.encode("utf-8")
        script.write_bytes(content)
        return script

    return _write


@pytest.fixture
def sample_script(write_script: Callable[[str | bytes], Path]) -> Path:
    """Install the standard sample helper script into the working directory."""
    return write_script(SAMPLE_SCRIPT)


# 🛠️📦🔚
