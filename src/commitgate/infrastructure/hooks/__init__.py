"""
Git Hooks module.

Provides the pre-commit hook script and its installer.
"""

from commitgate.infrastructure.hooks.installer import HookInstaller, HookInstallResult
from commitgate.infrastructure.hooks.pre_commit import PreCommitHook

__all__ = [
    "HookInstallResult",
    "HookInstaller",
    "PreCommitHook",
]
