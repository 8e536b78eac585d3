"""
Untracked file scan.

Catches files that were created (new modules, test snapshots, fixtures)
but never added, which the other checks would happily pass with
locally while the commit itself is incomplete.
"""

from fnmatch import fnmatchcase
from time import perf_counter

from commitgate.config.models import UntrackedCheckConfig
from commitgate.gate.domain.check import CheckContext, GateCheck
from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import CheckResult
from commitgate.shared.domain.exceptions import GitError
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

UNTRACKED_HINT = "git add them, or list them in .gitignore"


def _matches(path: str, patterns: list[str]) -> bool:
    """Match a repo-relative posix path against globs (`*` also crosses `/`)."""
    return any(fnmatchcase(path, p) for p in patterns)


def filter_paths(paths: list[str], patterns: list[str], exclude: list[str]) -> list[str]:
    """Keep paths matching any pattern and no exclude pattern, sorted."""
    return sorted(p for p in paths if _matches(p, patterns) and not _matches(p, exclude))


class UntrackedCheck(GateCheck):
    """Fail (or warn) when untracked, non-ignored files are present."""

    name = "untracked"
    default_title = "Untracked files"

    def __init__(
        self,
        patterns: list[str] | None = None,
        exclude: list[str] | None = None,
        title: str | None = None,
        blocking: bool = True,
    ):
        super().__init__(title=title, blocking=blocking)
        self.patterns = list(patterns) if patterns else ["*"]
        self.exclude = list(exclude or [])

    @classmethod
    def from_config(cls, config: UntrackedCheckConfig) -> "UntrackedCheck":
        return cls(
            patterns=config.patterns,
            exclude=config.exclude,
            title=config.title,
            blocking=config.blocking,
        )

    async def run_async(self, context: CheckContext) -> CheckResult:
        start = perf_counter()
        try:
            untracked = context.git.get_untracked_files()
        except GitError as e:
            return CheckResult(
                name=self.name,
                title=self.title,
                status=CheckStatus.FAILED,
                message="could not list untracked files",
                blocking=self.blocking,
                output=str(e),
                duration=perf_counter() - start,
            )

        found = filter_paths(untracked, self.patterns, self.exclude)
        duration = perf_counter() - start
        logger.debug("untracked_scan", total=len(untracked), matched=len(found))

        if not found:
            return CheckResult(
                name=self.name,
                title=self.title,
                status=CheckStatus.PASSED,
                message="no untracked files",
                blocking=self.blocking,
                duration=duration,
            )

        noun = "file" if len(found) == 1 else "files"
        return CheckResult(
            name=self.name,
            title=self.title,
            status=CheckStatus.FAILED if self.blocking else CheckStatus.WARNING,
            message=f"{len(found)} untracked {noun}",
            blocking=self.blocking,
            duration=duration,
            hint=UNTRACKED_HINT,
            items=found,
        )
