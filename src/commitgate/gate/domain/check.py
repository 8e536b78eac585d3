"""
GateCheck base class.

Every check the gate runs (formatting, tests, untracked scan) inherits
from GateCheck and turns whatever it observes into a CheckResult.
Checks never raise for a failing tool; exceptions are reserved for
problems that stop the whole gate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from commitgate.gate.domain.models import CheckResult

if TYPE_CHECKING:
    from commitgate.shared.infrastructure.config import Settings
    from commitgate.shared.infrastructure.execution import CommandExecutor
    from commitgate.shared.infrastructure.git import GitHelper


@dataclass
class CheckContext:
    """Everything a check may need while running."""

    repo_root: Path
    executor: CommandExecutor
    git: GitHelper
    settings: Settings
    output_tail_lines: int = 40


class GateCheck(ABC):
    """Abstract base for gate checks."""

    name: str = ""
    default_title: str = ""

    def __init__(self, title: str | None = None, blocking: bool = True):
        self.title = title or self.default_title or self.name
        self.blocking = blocking

    @abstractmethod
    async def run_async(self, context: CheckContext) -> CheckResult:
        """Run the check and describe the outcome."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, blocking={self.blocking})"
