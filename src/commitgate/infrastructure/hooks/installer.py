"""
Git hooks installer for commitgate.

Manages installation and uninstallation of the pre-commit hook.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from commitgate.infrastructure.hooks.pre_commit import PreCommitHook
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class HookInstallResult:
    """Result of hook installation."""

    hook_name: str
    installed: bool
    message: str
    already_existed: bool = False


class HookInstaller:
    """Manages the commitgate pre-commit hook."""

    @staticmethod
    def find_git_dir(start_path: Path | None = None) -> Path | None:
        """
        Find the git directory by traversing up from start_path.

        Follows `.git` files (`gitdir: <path>`) used by worktrees and
        submodules.

        Args:
            start_path: Starting directory (default: current directory)

        Returns:
            Path to the git directory or None
        """
        if start_path is None:
            start_path = Path.cwd()

        current = start_path.resolve()

        while True:
            candidate = current / ".git"
            if candidate.is_dir():
                return candidate
            if candidate.is_file():
                pointer = HookInstaller._read_gitdir_pointer(candidate)
                if pointer is not None:
                    return pointer
            if current == current.parent:
                return None
            current = current.parent

    @staticmethod
    def _read_gitdir_pointer(git_file: Path) -> Path | None:
        try:
            content = git_file.read_text(encoding="utf-8").strip()
        except OSError:
            return None
        if not content.startswith("gitdir:"):
            return None
        target = Path(content[len("gitdir:"):].strip())
        if not target.is_absolute():
            target = (git_file.parent / target).resolve()
        return target if target.is_dir() else None

    @staticmethod
    def work_tree(git_dir: Path) -> Path:
        """
        Work tree a git directory belongs to.

        A linked worktree's git dir (`.git/worktrees/<name>`) records the
        path of the worktree's `.git` file in `gitdir`.
        """
        gitdir_file = git_dir / "gitdir"
        if gitdir_file.is_file():
            dot_git = Path(gitdir_file.read_text(encoding="utf-8").strip())
            if not dot_git.is_absolute():
                dot_git = (git_dir / dot_git).resolve()
            if dot_git.parent.is_dir():
                return dot_git.parent
        return git_dir.parent

    @staticmethod
    def hooks_dir(git_dir: Path) -> Path:
        """
        Directory git reads hooks from.

        Honours core.hooksPath (relative values are relative to the work
        tree the hook runs in); otherwise the hooks directory of the common
        git dir, which linked worktrees share with the main checkout.
        """
        work_tree = HookInstaller.work_tree(git_dir)
        hooks_path = HookInstaller.get_git_config("core.hooksPath", cwd=work_tree)
        if hooks_path:
            configured = Path(hooks_path).expanduser()
            return configured if configured.is_absolute() else work_tree / configured

        common_dir_file = git_dir / "commondir"
        if common_dir_file.is_file():
            common_dir = Path(common_dir_file.read_text(encoding="utf-8").strip())
            if not common_dir.is_absolute():
                common_dir = (git_dir / common_dir).resolve()
            return common_dir / "hooks"
        return git_dir / "hooks"

    @staticmethod
    def install(git_dir: Path | None = None, force: bool = False) -> HookInstallResult:
        """
        Install the pre-commit hook.

        Args:
            git_dir: Path to .git directory (auto-detected if None)
            force: Overwrite an existing hook (a foreign hook is backed up)

        Returns:
            Installation result
        """
        if git_dir is None:
            git_dir = HookInstaller.find_git_dir()
            if git_dir is None:
                return HookInstallResult(
                    hook_name=PreCommitHook.HOOK_NAME,
                    installed=False,
                    message="Not a git repository",
                )

        hooks_dir = HookInstaller.hooks_dir(git_dir)
        already_installed = PreCommitHook.is_installed(hooks_dir)
        foreign_hook = PreCommitHook.exists(hooks_dir) and not already_installed

        installed = PreCommitHook.install(hooks_dir, force=force)

        if installed:
            message = "Installed successfully"
            if already_installed:
                message = "Reinstalled"
            elif foreign_hook:
                message = f"Installed (existing hook moved to {PreCommitHook.backup_path(hooks_dir).name})"
        else:
            message = "Another hook is already installed (use --force to replace it)"

        return HookInstallResult(
            hook_name=PreCommitHook.HOOK_NAME,
            installed=installed,
            message=message,
            already_existed=already_installed or foreign_hook,
        )

    @staticmethod
    def uninstall(git_dir: Path | None = None) -> HookInstallResult:
        """
        Uninstall the pre-commit hook, restoring a backed-up foreign hook.

        Args:
            git_dir: Path to .git directory (auto-detected if None)

        Returns:
            Uninstallation result; already_existed tells whether a hook was removed
        """
        if git_dir is None:
            git_dir = HookInstaller.find_git_dir()
            if git_dir is None:
                return HookInstallResult(
                    hook_name=PreCommitHook.HOOK_NAME,
                    installed=False,
                    message="Not a git repository",
                )

        removed = PreCommitHook.uninstall(HookInstaller.hooks_dir(git_dir))
        return HookInstallResult(
            hook_name=PreCommitHook.HOOK_NAME,
            installed=False,
            message="Uninstalled successfully" if removed else "Hook not found or not a commitgate hook",
            already_existed=removed,
        )

    @staticmethod
    def is_installed(git_dir: Path | None = None) -> bool:
        """Whether the commitgate pre-commit hook is in place."""
        if git_dir is None:
            git_dir = HookInstaller.find_git_dir()
            if git_dir is None:
                return False
        return PreCommitHook.is_installed(HookInstaller.hooks_dir(git_dir))

    @staticmethod
    def get_git_config(key: str, cwd: Path | None = None) -> str | None:
        """
        Get Git configuration value.

        Args:
            key: Git config key (e.g., "core.hooksPath")
            cwd: Directory to run git in (selects the repository)

        Returns:
            Config value or None
        """
        try:
            result = subprocess.run(
                ["git", "config", "--get", key],
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("git_config_unavailable", key=key, error=str(e))
            return None

        if result.returncode == 0:
            return result.stdout.strip() or None

        return None
