"""
Diagnostics for a commitgate setup.

Answers "will the hook work here?" before a commit finds out the hard way:
git available, configuration valid, check tools on PATH, hook installed.
"""

import shutil
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from commitgate.config.loader import load_gate_config
from commitgate.config.models import GateConfig
from commitgate.infrastructure.hooks.installer import HookInstaller
from commitgate.shared.domain.exceptions import CommitGateError
from commitgate.shared.infrastructure.config import Settings
from commitgate.shared.infrastructure.git import GitHelper
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class DiagnosticStatus(Enum):
    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass
class Diagnostic:
    name: str
    status: DiagnosticStatus
    message: str


class GateDoctor:
    """
    Diagnostic service for the current repository.
    Distinguishes between Critical Errors (the hook cannot run) and
    Warnings (the hook runs but something is off).
    """

    def __init__(self, working_dir: Path, settings: Settings, config_path: Path | None = None):
        self.working_dir = working_dir
        self.settings = settings
        self.config_path = config_path
        self.repo_root: Path | None = None
        self.config: GateConfig | None = None

    def run_all(self) -> list[Diagnostic]:
        """Run every diagnostic in order; later checks use earlier findings."""
        diagnostics = [
            self.check_python_version(),
            self.check_git(),
            self.check_config(),
        ]
        diagnostics.extend(self.check_tools())
        diagnostics.append(self.check_hook())
        logger.debug(
            "doctor_finished",
            errors=sum(d.status == DiagnosticStatus.ERROR for d in diagnostics),
        )
        return diagnostics

    @staticmethod
    def is_healthy(diagnostics: list[Diagnostic]) -> bool:
        return not any(d.status == DiagnosticStatus.ERROR for d in diagnostics)

    def check_python_version(self) -> Diagnostic:
        min_version = (3, 10)
        current = sys.version_info[:2]
        if current < min_version:
            return Diagnostic(
                "Python",
                DiagnosticStatus.ERROR,
                f"Python {current[0]}.{current[1]} detected, commitgate requires {min_version[0]}.{min_version[1]}+",
            )
        return Diagnostic("Python", DiagnosticStatus.SUCCESS, f"Python {current[0]}.{current[1]}")

    def check_git(self) -> Diagnostic:
        try:
            git = GitHelper(self.working_dir)
            self.repo_root = git.repo_root()
        except CommitGateError as e:
            return Diagnostic("Git", DiagnosticStatus.ERROR, str(e))
        return Diagnostic("Git", DiagnosticStatus.SUCCESS, f"Repository at {self.repo_root}")

    def check_config(self) -> Diagnostic:
        root = self.repo_root or self.working_dir
        config_file = self.config_path or root / self.settings.config_file
        try:
            self.config = load_gate_config(
                config_path=self.config_path,
                project_root=root,
                config_name=self.settings.config_file,
            )
        except CommitGateError as e:
            return Diagnostic("Configuration", DiagnosticStatus.ERROR, str(e))

        if not config_file.exists():
            return Diagnostic(
                "Configuration",
                DiagnosticStatus.WARNING,
                f"{config_file.name} not found, using '{self.config.preset.value}' preset defaults "
                "(run 'commitgate init')",
            )
        return Diagnostic("Configuration", DiagnosticStatus.SUCCESS, f"{config_file} is valid")

    def check_tools(self) -> list[Diagnostic]:
        if self.config is None:
            return []

        diagnostics = []
        for name in ("format", "tests"):
            check_config = getattr(self.config.checks, name)
            if not check_config.enabled:
                diagnostics.append(Diagnostic(f"Check '{name}'", DiagnosticStatus.WARNING, "disabled"))
                continue
            executable = check_config.command[0]
            found = shutil.which(executable)
            if found:
                diagnostics.append(Diagnostic(f"Check '{name}'", DiagnosticStatus.SUCCESS, f"{executable} -> {found}"))
            else:
                status = DiagnosticStatus.ERROR if check_config.blocking else DiagnosticStatus.WARNING
                diagnostics.append(Diagnostic(f"Check '{name}'", status, f"{executable} not found on PATH"))
        return diagnostics

    def check_hook(self) -> Diagnostic:
        git_dir = HookInstaller.find_git_dir(self.working_dir)
        if git_dir is None:
            return Diagnostic("Hook", DiagnosticStatus.WARNING, "no git directory, hook not checked")
        if HookInstaller.is_installed(git_dir):
            return Diagnostic("Hook", DiagnosticStatus.SUCCESS, "pre-commit hook installed")
        return Diagnostic(
            "Hook",
            DiagnosticStatus.WARNING,
            "pre-commit hook not installed (run 'commitgate hooks install')",
        )
