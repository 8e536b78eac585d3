"""Shared test fixtures for the commitgate test suite."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from commitgate.config.loader import build_gate_config
from commitgate.gate.domain.check import CheckContext
from commitgate.shared.infrastructure.config import Settings
from commitgate.shared.infrastructure.execution import CommandExecutor, CommandResult
from commitgate.shared.infrastructure.git import GitHelper


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the developer's SKIP variable and git configuration out of the tests."""
    monkeypatch.delenv("SKIP", raising=False)
    for name in ("COMMITGATE_CONFIG_FILE", "COMMITGATE_LOG_LEVEL", "COMMITGATE_APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig-global"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture
def settings():
    """Settings that ignore any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def gate_config():
    """Default (python preset) configuration."""
    return build_gate_config(None)


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=repo, capture_output=True, text=True, check=True)
    return result.stdout


@pytest.fixture
def git_repo(tmp_path):
    """Create an initialised git repository with one commit."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "dev@example.com")
    _git(repo, "config", "user.name", "Dev")
    _git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# project\n")
    (repo / ".gitignore").write_text("*.log\nbuild/\n")
    _git(repo, "add", "README.md", ".gitignore")
    _git(repo, "commit", "-q", "-m", "initial")
    return repo


@pytest.fixture
def git_cmd():
    """Run git in a repository: git_cmd(repo, "add", "x")."""
    return _git


def make_command_result(exit_code=0, stdout="", stderr="", duration=0.1, **kwargs) -> CommandResult:
    return CommandResult(
        command=kwargs.pop("command", "tool --check"),
        exit_code=exit_code,
        stdout=stdout,
        stderr=stderr,
        duration=duration,
        **kwargs,
    )


@pytest.fixture
def make_result():
    """Factory for CommandResult objects."""
    return make_command_result


@pytest.fixture
def mock_executor():
    """CommandExecutor whose run_async returns a passing result by default."""
    executor = MagicMock(spec=CommandExecutor)
    executor.run_async = AsyncMock(return_value=make_command_result())
    return executor


@pytest.fixture
def mock_git():
    """GitHelper reporting a clean working tree."""
    git = MagicMock(spec=GitHelper)
    git.get_untracked_files.return_value = []
    return git


@pytest.fixture
def check_context(tmp_path, mock_executor, mock_git, settings):
    return CheckContext(
        repo_root=tmp_path,
        executor=mock_executor,
        git=mock_git,
        settings=settings,
        output_tail_lines=5,
    )
