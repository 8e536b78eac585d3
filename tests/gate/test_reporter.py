"""Tests for the console reporter."""

import io

import pytest
from rich.console import Console

from commitgate.gate.application.reporter import ConsoleReporter
from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import CheckResult, GateReport


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, no_color=True, width=120, highlight=False)


def _failed_format():
    return CheckResult(
        name="format",
        title="Formatting",
        status=CheckStatus.FAILED,
        message="black --check . exited with status 1",
        output="would reformat src/[app].py",
        hint="Run: black .",
        duration=0.4,
    )


def test_progress_lines(console, buffer):
    reporter = ConsoleReporter(console=console)

    reporter.on_progress("check_started", {"check": "format", "title": "Formatting", "index": 1, "total": 3})
    reporter.on_progress("check_finished", {"result": _failed_format(), "index": 1, "total": 3})

    text = buffer.getvalue()
    assert "[1/3] Formatting ..." in text
    assert "FAIL Formatting: black --check . exited with status 1" in text
    # rich markup in tool output is printed literally
    assert "would reformat src/[app].py" in text
    assert "Hint: Run: black ." in text


def test_untracked_items_listed(console, buffer):
    result = CheckResult(
        name="untracked",
        title="Untracked files",
        status=CheckStatus.WARNING,
        message="1 untracked file",
        blocking=False,
        items=["snapshots/new.png"],
    )

    ConsoleReporter(console=console).print_result(result)

    assert "WARN Untracked files: 1 untracked file" in buffer.getvalue()
    assert "snapshots/new.png" in buffer.getvalue()


def test_quiet_hides_passing_checks(console, buffer):
    reporter = ConsoleReporter(console=console, quiet=True)
    passed = CheckResult(name="tests", title="Tests", status=CheckStatus.PASSED, message="pytest passed")

    reporter.on_progress("check_started", {"check": "tests", "title": "Tests", "index": 2, "total": 3})
    reporter.on_progress("check_finished", {"result": passed, "index": 2, "total": 3})

    assert buffer.getvalue() == ""


def test_summary_verdicts(console, buffer):
    reporter = ConsoleReporter(console=console)

    reporter.print_summary(GateReport(results=[
        CheckResult(name="tests", title="Tests", status=CheckStatus.PASSED, message="pytest passed"),
    ]))
    assert "Commit allowed" in buffer.getvalue()

    reporter.print_summary(GateReport(results=[_failed_format()]))
    text = buffer.getvalue()
    assert "Commit blocked by: format" in text
    assert "git commit --no-verify" in text
