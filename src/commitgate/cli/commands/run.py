"""
`commitgate run` - the command the pre-commit hook executes.

Exit codes:
    0  every blocking check passed, the commit may proceed
    1  at least one blocking check failed, the commit is blocked
    2  the gate could not run (configuration, git, usage errors)
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from commitgate.config.loader import load_gate_config
from commitgate.gate.application.reporter import ConsoleReporter
from commitgate.gate.application.runner import GateRunner
from commitgate.gate.domain.models import EXIT_ERROR
from commitgate.shared.domain.exceptions import CommitGateError
from commitgate.shared.infrastructure.config import settings
from commitgate.shared.infrastructure.git import GitHelper
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def run_cmd(
    only: Optional[List[str]] = typer.Option(
        None,
        "--only",
        help="Run only these checks: format, tests, untracked (repeatable)",
    ),
    skip: Optional[List[str]] = typer.Option(
        None,
        "--skip",
        help="Skip these checks (repeatable); the SKIP environment variable works too",
    ),
    no_fail_fast: bool = typer.Option(
        False,
        "--no-fail-fast",
        help="Keep running the remaining checks after a failure",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: .commitgate.yaml in the repository root)",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print failures and the verdict"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON instead"),
):
    """Run the pre-commit checks: formatting, tests, untracked files."""
    console = Console(no_color=no_color or None, highlight=False)
    reporter = ConsoleReporter(console=console, quiet=quiet)

    try:
        git = GitHelper(Path.cwd())
        repo_root = git.repo_root()
        gate_config = load_gate_config(
            config_path=config,
            project_root=repo_root,
            config_name=settings.config_file,
        )
        runner = GateRunner(
            config=gate_config,
            settings=settings,
            repo_root=repo_root,
            git=git,
            only=only,
            skip=skip,
            fail_fast=False if no_fail_fast else None,
            progress_callback=None if json_output else reporter.on_progress,
        )
        report = asyncio.run(runner.run_async())
    except CommitGateError as e:
        logger.error("gate_run_error", error=str(e), context=e.context)
        console.print(f"[bold red]✗ commitgate:[/bold red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)

    if json_output:
        typer.echo(json.dumps(report.to_json(), indent=2))
    else:
        reporter.print_summary(report)

    raise typer.Exit(report.exit_code)
