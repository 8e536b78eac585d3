"""Tests for GateRunner: ordering, fail-fast, selection and skipping."""

import pytest

from commitgate.config.loader import build_gate_config
from commitgate.gate.application.runner import GateRunner, parse_skip_list
from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import EXIT_BLOCKED, EXIT_OK
from commitgate.shared.domain.exceptions import ConfigurationError


@pytest.fixture
def make_runner(gate_config, settings, tmp_path, mock_executor, mock_git):
    def _make(config=None, **kwargs):
        return GateRunner(
            config=config or gate_config,
            settings=settings,
            repo_root=tmp_path,
            git=mock_git,
            executor=mock_executor,
            **kwargs,
        )

    return _make


def test_parse_skip_list():
    assert parse_skip_list(None) == set()
    assert parse_skip_list("format, tests,,") == {"format", "tests"}


def test_build_checks_in_order(make_runner):
    checks = make_runner().build_checks()

    assert [c.name for c in checks] == ["format", "tests", "untracked"]


def test_disabled_checks_are_not_built(make_runner):
    config = build_gate_config({"checks": {"tests": {"enabled": False}}})

    checks = make_runner(config=config).build_checks()

    assert [c.name for c in checks] == ["format", "untracked"]


@pytest.mark.asyncio
async def test_all_checks_pass(make_runner, mock_executor):
    report = await make_runner().run_async()

    assert report.passed
    assert report.exit_code == EXIT_OK
    assert [r.status for r in report.results] == [CheckStatus.PASSED] * 3
    assert mock_executor.run_async.await_count == 2
    commands = [call.args[0] for call in mock_executor.run_async.call_args_list]
    assert commands == [["black", "--check", "--diff", "."], ["pytest", "-q"]]


@pytest.mark.asyncio
async def test_fail_fast_stops_after_first_blocking_failure(make_runner, mock_executor, mock_git, make_result):
    mock_executor.run_async.return_value = make_result(exit_code=1)

    report = await make_runner().run_async()

    assert report.exit_code == EXIT_BLOCKED
    assert report.aborted
    assert [r.status for r in report.results] == [
        CheckStatus.FAILED,
        CheckStatus.SKIPPED,
        CheckStatus.SKIPPED,
    ]
    assert report.results[1].message == "not run (fail-fast)"
    assert mock_executor.run_async.await_count == 1
    mock_git.get_untracked_files.assert_not_called()


@pytest.mark.asyncio
async def test_no_fail_fast_runs_everything(make_runner, mock_executor, mock_git, make_result):
    mock_executor.run_async.return_value = make_result(exit_code=1)
    mock_git.get_untracked_files.return_value = ["stray.py"]

    report = await make_runner(fail_fast=False).run_async()

    assert not report.aborted
    assert [r.name for r in report.failed] == ["format", "tests", "untracked"]
    assert mock_executor.run_async.await_count == 2


@pytest.mark.asyncio
async def test_failure_in_last_check_is_not_an_abort(make_runner, mock_git):
    mock_git.get_untracked_files.return_value = ["stray.py"]

    report = await make_runner().run_async()

    assert report.exit_code == EXIT_BLOCKED
    assert not report.aborted
    assert [r.name for r in report.failed] == ["untracked"]


@pytest.mark.asyncio
async def test_warning_does_not_block(make_runner, mock_git):
    config = build_gate_config({"checks": {"untracked": {"blocking": False}}})
    mock_git.get_untracked_files.return_value = ["stray.py"]

    report = await make_runner(config=config).run_async()

    assert report.passed
    assert [r.name for r in report.warnings] == ["untracked"]


@pytest.mark.asyncio
async def test_only_selects_checks(make_runner, mock_executor):
    report = await make_runner(only=["untracked"]).run_async()

    assert [r.status for r in report.results] == [
        CheckStatus.SKIPPED,
        CheckStatus.SKIPPED,
        CheckStatus.PASSED,
    ]
    assert report.results[0].message == "not selected"
    mock_executor.run_async.assert_not_awaited()


@pytest.mark.asyncio
async def test_skip_option_and_env_var(make_runner, mock_executor, monkeypatch):
    monkeypatch.setenv("SKIP", "tests,some-other-hook")

    report = await make_runner(skip=["format"]).run_async()

    statuses = {r.name: r.status for r in report.results}
    assert statuses == {
        "format": CheckStatus.SKIPPED,
        "tests": CheckStatus.SKIPPED,
        "untracked": CheckStatus.PASSED,
    }
    mock_executor.run_async.assert_not_awaited()


def test_unknown_check_name_rejected(make_runner):
    with pytest.raises(ConfigurationError, match="Unknown check name"):
        make_runner(skip=["lint"])


@pytest.mark.asyncio
async def test_progress_events(make_runner):
    events = []

    await make_runner(progress_callback=lambda event, data: events.append((event, data))).run_async()

    assert [e for e, _ in events] == ["check_started", "check_finished"] * 3
    assert events[0][1] == {"check": "format", "title": "Formatting", "index": 1, "total": 3}
    assert events[-1][1]["result"].name == "untracked"


@pytest.mark.asyncio
async def test_requested_skip_wins_over_fail_fast(make_runner, mock_executor, make_result, monkeypatch):
    mock_executor.run_async.return_value = make_result(exit_code=1)
    monkeypatch.setenv("SKIP", "untracked")

    report = await make_runner().run_async()

    assert report.aborted
    assert [(r.name, r.message) for r in report.results[1:]] == [
        ("tests", "not run (fail-fast)"),
        ("untracked", "skipped on request"),
    ]
