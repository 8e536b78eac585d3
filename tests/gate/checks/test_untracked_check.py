"""Tests for the untracked file scan."""

import pytest

from commitgate.gate.checks.untracked_check import UNTRACKED_HINT, UntrackedCheck, filter_paths
from commitgate.gate.domain.check import CheckContext
from commitgate.gate.domain.enums import CheckStatus
from commitgate.shared.domain.exceptions import GitError
from commitgate.shared.infrastructure.execution import CommandExecutor
from commitgate.shared.infrastructure.git import GitHelper


def test_filter_paths_matches_repo_relative_path():
    paths = ["src/new_module.py", "snapshots/render.png", "notes.txt", "docs/guide/intro.md"]

    assert filter_paths(paths, ["*.py"], []) == ["src/new_module.py"]
    assert filter_paths(paths, ["snapshots/*"], []) == ["snapshots/render.png"]
    assert filter_paths(paths, ["docs/*"], []) == ["docs/guide/intro.md"]
    assert filter_paths(paths, ["*"], ["*.txt", "docs/*"]) == ["snapshots/render.png", "src/new_module.py"]


def test_filter_paths_does_not_match_basename_alone():
    paths = ["conftest.py", "sub/conftest.py"]

    assert filter_paths(paths, ["conftest.py"], []) == ["conftest.py"]
    assert filter_paths(paths, ["*"], ["conftest.py"]) == ["sub/conftest.py"]
    assert filter_paths(paths, ["*/conftest.py"], []) == ["sub/conftest.py"]


@pytest.mark.asyncio
async def test_clean_tree_passes(check_context, mock_git):
    result = await UntrackedCheck().run_async(check_context)

    assert result.status == CheckStatus.PASSED
    assert result.message == "no untracked files"
    mock_git.get_untracked_files.assert_called_once()


@pytest.mark.asyncio
async def test_untracked_files_block_by_default(check_context, mock_git):
    mock_git.get_untracked_files.return_value = ["src/b.py", "src/a.py"]

    result = await UntrackedCheck().run_async(check_context)

    assert result.status == CheckStatus.FAILED
    assert result.blocks_commit
    assert result.message == "2 untracked files"
    assert result.items == ["src/a.py", "src/b.py"]
    assert result.hint == UNTRACKED_HINT


@pytest.mark.asyncio
async def test_non_blocking_scan_warns(check_context, mock_git):
    mock_git.get_untracked_files.return_value = ["scratch.py"]

    result = await UntrackedCheck(blocking=False).run_async(check_context)

    assert result.status == CheckStatus.WARNING
    assert result.message == "1 untracked file"
    assert not result.blocks_commit


@pytest.mark.asyncio
async def test_files_outside_patterns_are_ignored(check_context, mock_git):
    mock_git.get_untracked_files.return_value = ["notes.txt", "tmp/debug.out"]

    result = await UntrackedCheck(patterns=["*.rs", "snapshots/*"]).run_async(check_context)

    assert result.status == CheckStatus.PASSED


@pytest.mark.asyncio
async def test_git_failure_fails_check(check_context, mock_git):
    mock_git.get_untracked_files.side_effect = GitError("git ls-files failed: fatal: bad object")

    result = await UntrackedCheck().run_async(check_context)

    assert result.status == CheckStatus.FAILED
    assert "bad object" in result.output


@pytest.mark.asyncio
async def test_real_repository_scan(git_repo, settings):
    (git_repo / "new_module.py").write_text("x = 1\n")
    (git_repo / "debug.log").write_text("ignored by .gitignore\n")
    (git_repo / "src").mkdir()
    (git_repo / "src" / "nested file.py").write_text("y = 2\n")

    context = CheckContext(
        repo_root=git_repo,
        executor=CommandExecutor(),
        git=GitHelper(git_repo),
        settings=settings,
    )

    result = await UntrackedCheck().run_async(context)

    assert result.status == CheckStatus.FAILED
    assert result.items == ["new_module.py", "src/nested file.py"]
