from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

# Detect CI environment (GitHub Actions sets CI=true)
IS_CI = os.environ.get("CI", "").lower() == "true"

HAS_GIT = shutil.which("git") is not None


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "local_only: marks tests that require local environment (skip in CI)",
    )
    config.addinivalue_line(
        "markers",
        "requires_git: marks tests that spawn a real git executable",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip local_only tests in CI and git tests when git is not installed."""
    skip_ci = pytest.mark.skip(reason="Skipped in CI (requires local environment)")
    skip_git = pytest.mark.skip(reason="git executable not found on PATH")
    for item in items:
        if IS_CI and "local_only" in item.keywords:
            item.add_marker(skip_ci)
        if not HAS_GIT and "requires_git" in item.keywords:
            item.add_marker(skip_git)


ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def ensure_commands_registered() -> None:
    """Ensure CLI commands are registered before tests run."""
    from repokit.main import _register_commands

    _register_commands()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config to a temp path and drop REPOKIT_* overrides from the environment."""
    from repokit.core.config import set_default_config

    for key in list(os.environ):
        if key.startswith("REPOKIT_"):
            monkeypatch.delenv(key, raising=False)
    cfg_path = tmp_path / "repokit.toml"
    monkeypatch.setenv("REPOKIT_CONFIG", str(cfg_path))
    set_default_config(None)
    yield cfg_path
    set_default_config(None)


@pytest.fixture(autouse=True)
def reset_repokit_logger() -> Iterator[None]:
    """Undo handlers installed by setup_logging during CLI tests."""
    yield
    logger = logging.getLogger("repokit")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def capture_console(monkeypatch: Any) -> Console:
    """Use an in-memory Rich console during tests."""
    test_console = Console(record=True, width=200)
    import repokit.commands.changes as changes_cmd
    import repokit.commands.remote as remote_cmd
    import repokit.commands.repo as repo_cmd
    import repokit.core.console as core_console
    import repokit.core.decorators as decorators
    import repokit.main as repokit_main

    monkeypatch.setattr(core_console, "console", test_console)
    monkeypatch.setattr(repokit_main, "console", test_console)
    monkeypatch.setattr(decorators, "stderr_console", test_console)
    for module in (changes_cmd, remote_cmd, repo_cmd):
        monkeypatch.setattr(module, "console", test_console)
    return test_console


@dataclass
class GitCall:
    argv: list[str]
    cwd: str | None
    kwargs: dict[str, Any]


@dataclass
class FakeGit:
    """Stand-in for subprocess.run that records every git invocation."""

    calls: list[GitCall] = field(default_factory=list)
    responses: list[tuple[int, str, str]] = field(default_factory=list)
    default: tuple[int, str, str] = (0, "", "")

    def queue(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses.append((returncode, stdout, stderr))

    def __call__(self, argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        self.calls.append(GitCall(argv=list(argv), cwd=kwargs.get("cwd"), kwargs=kwargs))
        returncode, stdout, stderr = self.responses.pop(0) if self.responses else self.default
        return subprocess.CompletedProcess(
            argv, returncode, stdout=stdout.encode("utf-8"), stderr=stderr.encode("utf-8")
        )

    @property
    def last(self) -> GitCall:
        return self.calls[-1]


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    """Replace subprocess.run as seen by the runner module."""
    import repokit.git.runner as runner_module

    fake = FakeGit()
    monkeypatch.setattr(runner_module.subprocess, "run", fake)
    return fake


@pytest.fixture
def git_identity(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Give real git invocations a predictable identity and no user/system config."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Repokit Tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Repokit Tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "tests@example.com")
