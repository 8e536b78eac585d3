"""
Command-backed checks: formatting and tests.

Both run a configured command in the repository root and pass when it
exits with status 0.
"""

from commitgate.config.models import CommandCheckConfig
from commitgate.gate.domain.check import CheckContext, GateCheck
from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import CheckResult
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def tail_lines(text: str, limit: int) -> str:
    """Keep the last `limit` lines of text; 0 keeps nothing."""
    if limit <= 0 or not text:
        return ""
    lines = text.rstrip("\n").splitlines()
    if len(lines) <= limit:
        return "\n".join(lines)
    omitted = len(lines) - limit
    return f"... ({omitted} earlier lines omitted)\n" + "\n".join(lines[-limit:])


class CommandCheck(GateCheck):
    """Run a command; exit status 0 passes."""

    def __init__(
        self,
        command: list[str],
        title: str | None = None,
        blocking: bool = True,
        timeout: float | None = None,
        fix_hint: str | None = None,
        env: dict[str, str] | None = None,
    ):
        super().__init__(title=title, blocking=blocking)
        self.command = list(command)
        self.timeout = timeout
        self.fix_hint = fix_hint
        self.env = dict(env or {})

    @classmethod
    def from_config(cls, config: CommandCheckConfig) -> "CommandCheck":
        return cls(
            command=config.command,
            title=config.title,
            blocking=config.blocking,
            timeout=config.timeout,
            fix_hint=config.fix_hint,
            env=config.env,
        )

    async def run_async(self, context: CheckContext) -> CheckResult:
        timeout = self.timeout if self.timeout is not None else context.settings.default_timeout
        result = await context.executor.run_async(
            self.command,
            cwd=context.repo_root,
            env=self.env or None,
            timeout=timeout,
        )

        if result.is_success:
            return CheckResult(
                name=self.name,
                title=self.title,
                status=CheckStatus.PASSED,
                message=f"{result.command} passed",
                blocking=self.blocking,
                duration=result.duration,
            )

        failed_status = CheckStatus.FAILED if self.blocking else CheckStatus.WARNING

        if result.not_found:
            message = f"command not found: {self.command[0]}"
            hint = f"Install {self.command[0]} or change checks.{self.name}.command in the configuration"
            output = ""
        elif result.is_timeout:
            message = f"{result.command} timed out after {timeout:g}s"
            hint = f"Raise checks.{self.name}.timeout or speed up the command"
            output = ""
        else:
            message = f"{result.command} exited with status {result.exit_code}"
            hint = self.fix_hint
            output = tail_lines(result.output, context.output_tail_lines)

        logger.debug(
            "command_check_failed",
            check=self.name,
            exit_code=result.exit_code,
            timeout=result.is_timeout,
            not_found=result.not_found,
        )

        return CheckResult(
            name=self.name,
            title=self.title,
            status=failed_status,
            message=message,
            blocking=self.blocking,
            output=output,
            duration=result.duration,
            hint=hint,
        )


class FormatCheck(CommandCheck):
    """Code formatting check (black --check, cargo fmt -- --check, ...)."""

    name = "format"
    default_title = "Formatting"


class TestCheck(CommandCheck):
    """Test suite run (pytest, cargo test, ...)."""

    __test__ = False  # keep pytest from collecting this class

    name = "tests"
    default_title = "Tests"
