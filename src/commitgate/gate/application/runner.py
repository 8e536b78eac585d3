"""
Gate runner.

Builds the enabled checks from the configuration and runs them one after
another: formatting, tests, untracked scan. With fail_fast the first
blocking failure ends the run and the remaining checks are reported as
skipped.
"""

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from commitgate.config.models import GateConfig
from commitgate.gate.checks import CHECK_ORDER, FormatCheck, TestCheck, UntrackedCheck
from commitgate.gate.domain.check import CheckContext, GateCheck
from commitgate.gate.domain.models import CheckResult, GateReport
from commitgate.shared.domain.exceptions import ConfigurationError
from commitgate.shared.infrastructure.config import Settings
from commitgate.shared.infrastructure.execution import CommandExecutor
from commitgate.shared.infrastructure.git import GitHelper
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[str, dict[str, Any]], None]


def parse_skip_list(value: str | None) -> set[str]:
    """Parse a comma separated list of check names (SKIP=format,tests)."""
    if not value:
        return set()
    return {name.strip() for name in value.split(",") if name.strip()}


class GateRunner:
    """
    Runs the configured checks for one commit attempt.

    Events passed to progress_callback:
    - check_started: {"check", "title", "index", "total"}
    - check_finished: {"result", "index", "total"}
    """

    def __init__(
        self,
        config: GateConfig,
        settings: Settings,
        repo_root: Path,
        git: GitHelper,
        executor: CommandExecutor | None = None,
        only: Iterable[str] | None = None,
        skip: Iterable[str] | None = None,
        fail_fast: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        self.config = config
        self.settings = settings
        self.repo_root = repo_root
        self.git = git
        self.executor = executor or CommandExecutor(default_timeout=settings.default_timeout)
        self.only = set(only or [])
        self.skip = set(skip or []) | parse_skip_list(os.environ.get(settings.skip_env_var))
        self.fail_fast = config.fail_fast if fail_fast is None else fail_fast
        self.progress_callback = progress_callback

        unknown = (self.only | self.skip) - set(CHECK_ORDER)
        # SKIP is shared with the pre-commit framework, so unknown names there are tolerated
        unknown -= parse_skip_list(os.environ.get(settings.skip_env_var))
        if unknown:
            raise ConfigurationError(
                f"Unknown check name(s): {', '.join(sorted(unknown))} "
                f"(valid: {', '.join(CHECK_ORDER)})",
                context={"unknown": sorted(unknown)},
            )

    def build_checks(self) -> list[GateCheck]:
        """Enabled checks in run order, regardless of --only/--skip."""
        checks_config = self.config.checks
        checks: list[GateCheck] = []

        if checks_config.format.enabled:
            checks.append(FormatCheck.from_config(checks_config.format))
        if checks_config.tests.enabled:
            checks.append(TestCheck.from_config(checks_config.tests))
        if checks_config.untracked.enabled:
            checks.append(UntrackedCheck.from_config(checks_config.untracked))

        return checks

    def _skip_reason(self, check: GateCheck) -> str | None:
        if self.only and check.name not in self.only:
            return "not selected"
        if check.name in self.skip:
            return "skipped on request"
        return None

    def _emit(self, event: str, data: dict[str, Any]) -> None:
        if self.progress_callback:
            self.progress_callback(event, data)

    async def run_async(self) -> GateReport:
        """Run all checks sequentially and collect a GateReport."""
        checks = self.build_checks()
        context = CheckContext(
            repo_root=self.repo_root,
            executor=self.executor,
            git=self.git,
            settings=self.settings,
            output_tail_lines=self.config.output_tail_lines,
        )
        report = GateReport()
        total = len(checks)

        logger.info(
            "gate_run_started",
            repo_root=str(self.repo_root),
            checks=[c.name for c in checks],
            fail_fast=self.fail_fast,
        )

        for index, check in enumerate(checks, start=1):
            if (reason := self._skip_reason(check)) is not None:
                result = CheckResult.skipped(check.name, check.title, reason, check.blocking)
            elif report.aborted:
                result = CheckResult.skipped(check.name, check.title, "not run (fail-fast)", check.blocking)
            else:
                self._emit("check_started", {"check": check.name, "title": check.title, "index": index, "total": total})
                logger.debug("gate_check_started", check=check.name)
                result = await check.run_async(context)
                logger.info(
                    "gate_check_finished",
                    check=check.name,
                    status=result.status.value,
                    duration=round(result.duration, 3),
                )
                if result.blocks_commit and self.fail_fast:
                    report.aborted = index < total

            report.results.append(result)
            self._emit("check_finished", {"result": result, "index": index, "total": total})

        logger.info(
            "gate_run_finished",
            exit_code=report.exit_code,
            failed=[r.name for r in report.failed],
            aborted=report.aborted,
        )
        return report
