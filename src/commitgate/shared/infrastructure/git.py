"""
Git Helper for commitgate.

Wraps the handful of git queries the gate needs:
- Fail Fast: raise GitError if git is missing or the directory is not a work tree.
- Observability: log every subprocess call.
"""

import shutil
import subprocess
from pathlib import Path

from commitgate.shared.domain.exceptions import GitError
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class GitHelper:
    def __init__(self, working_dir: Path):
        self.working_dir = Path(working_dir)
        git_cmd = shutil.which("git")

        if not git_cmd:
            raise GitError("Git executable not found in PATH")

        self.git_cmd: str = git_cmd

        if not (self.working_dir / ".git").exists():
            # Check if we are in a subdirectory of a repo
            try:
                self._run("rev-parse", "--is-inside-work-tree")
            except GitError:
                raise GitError(
                    f"Directory {self.working_dir} is not a git repository",
                    context={"working_dir": str(self.working_dir)},
                ) from None

    def repo_root(self) -> Path:
        """Absolute path of the top-level directory of the work tree."""
        return Path(self._run("rev-parse", "--show-toplevel").strip())

    def get_untracked_files(self) -> list[str]:
        """
        List untracked files that are not ignored.

        Paths are relative to the repository root, in posix form, sorted.
        """
        logger.debug("git_untracked_scan_started", cwd=str(self.working_dir))
        # -z keeps git from quoting paths with unusual characters
        output = self._run(
            "ls-files", "-z", "--others", "--exclude-standard",
            cwd=self.repo_root(),
        )
        files = sorted({entry for entry in output.split("\0") if entry.strip()})
        logger.debug("git_untracked_scan_completed", count=len(files))
        return files

    def get_staged_files(self, diff_filter: str = "ACMR") -> list[str]:
        """List files staged for the next commit (added, copied, modified, renamed by default)."""
        output = self._run("diff", "--cached", "--name-only", f"--diff-filter={diff_filter}")
        return sorted({line.strip() for line in output.splitlines() if line.strip()})

    def describe(self) -> str | None:
        """
        Describe HEAD (tags, short hash, dirty marker).

        Returns None for a repository without commits.
        """
        try:
            return self._run("describe", "--tags", "--always", "--dirty").strip() or None
        except GitError:
            return None

    def _run(self, *args: str, cwd: Path | None = None) -> str:
        cmd = [self.git_cmd, *args]
        logger.debug("git_command", args=list(args))
        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd or self.working_dir),
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            logger.debug("git_command_failed", args=list(args), stderr=e.stderr)
            raise GitError(
                f"git {' '.join(args)} failed: {(e.stderr or '').strip()}",
                context={"returncode": e.returncode},
            ) from e
        except OSError as e:
            raise GitError(f"Could not run git: {e}") from e
        return result.stdout
