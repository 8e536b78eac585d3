"""
pre-commit hook script management.

The installed script is a small POSIX shell stub that hands over to
`python -m commitgate run` with the interpreter commitgate was installed
into, so the hook keeps working outside an activated virtualenv.
"""

import shlex
import stat
import sys
from pathlib import Path

from commitgate.shared.domain.exceptions import HookInstallError
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

HOOK_MARKER = "# commitgate-managed-hook"
BACKUP_SUFFIX = ".commitgate.bak"


class PreCommitHook:
    """Install, detect and remove the commitgate pre-commit hook."""

    HOOK_NAME = "pre-commit"

    @staticmethod
    def script(python: str | None = None) -> str:
        """Render the hook script for the given interpreter."""
        interpreter = shlex.quote(python or sys.executable)
        return (
            "#!/bin/sh\n"
            f"{HOOK_MARKER}\n"
            "# Installed by `commitgate hooks install`; remove with `commitgate hooks uninstall`.\n"
            "# Bypass once with: git commit --no-verify\n"
            f"exec {interpreter} -m commitgate run \"$@\"\n"
        )

    @classmethod
    def hook_path(cls, hooks_dir: Path) -> Path:
        return hooks_dir / cls.HOOK_NAME

    @classmethod
    def backup_path(cls, hooks_dir: Path) -> Path:
        return hooks_dir / f"{cls.HOOK_NAME}{BACKUP_SUFFIX}"

    @classmethod
    def exists(cls, hooks_dir: Path) -> bool:
        """Whether any pre-commit hook (ours or not) is present."""
        return cls.hook_path(hooks_dir).exists()

    @classmethod
    def is_installed(cls, hooks_dir: Path) -> bool:
        """Whether the present pre-commit hook is managed by commitgate."""
        path = cls.hook_path(hooks_dir)
        if not path.is_file():
            return False
        try:
            return HOOK_MARKER in path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return False

    @classmethod
    def install(cls, hooks_dir: Path, force: bool = False, python: str | None = None) -> bool:
        """
        Write the hook script.

        Returns False when a foreign hook is present and force is not set.
        With force, the foreign hook is moved aside to pre-commit.commitgate.bak.

        Raises:
            HookInstallError: If the hooks directory or script cannot be written
        """
        path = cls.hook_path(hooks_dir)

        try:
            hooks_dir.mkdir(parents=True, exist_ok=True)

            if path.exists() and not cls.is_installed(hooks_dir):
                if not force:
                    logger.info("foreign_hook_present", path=str(path))
                    return False
                backup = cls.backup_path(hooks_dir)
                path.replace(backup)
                logger.info("foreign_hook_backed_up", path=str(path), backup=str(backup))

            path.write_text(cls.script(python), encoding="utf-8")
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH | stat.S_IRUSR | stat.S_IWUSR)
        except OSError as e:
            raise HookInstallError(f"Cannot write {path}: {e}", context={"path": str(path)}) from e

        logger.info("hook_installed", hook=cls.HOOK_NAME, path=str(path))
        return True

    @classmethod
    def uninstall(cls, hooks_dir: Path) -> bool:
        """
        Remove a commitgate-managed hook, restoring any backed up hook.

        Returns False if no commitgate hook is installed.
        """
        if not cls.is_installed(hooks_dir):
            return False

        path = cls.hook_path(hooks_dir)
        backup = cls.backup_path(hooks_dir)
        try:
            path.unlink()
            if backup.exists():
                backup.replace(path)
                logger.info("foreign_hook_restored", path=str(path))
        except OSError as e:
            raise HookInstallError(f"Cannot remove {path}: {e}", context={"path": str(path)}) from e

        logger.info("hook_uninstalled", hook=cls.HOOK_NAME, path=str(path))
        return True
