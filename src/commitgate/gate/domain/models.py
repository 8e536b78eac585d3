"""
Gate result models.

A run produces one CheckResult per configured check, collected into a
GateReport whose exit_code becomes the hook's exit status.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from commitgate.gate.domain.enums import CheckStatus

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_ERROR = 2


@dataclass
class CheckResult:
    """Result from a single check."""

    name: str
    title: str
    status: CheckStatus
    message: str
    blocking: bool = True
    output: str = ""
    duration: float = 0.0  # in seconds
    hint: str | None = None
    items: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    @property
    def blocks_commit(self) -> bool:
        """A failed blocking check stops the commit."""
        return self.status == CheckStatus.FAILED and self.blocking

    @classmethod
    def skipped(cls, name: str, title: str, reason: str, blocking: bool = True) -> CheckResult:
        return cls(name=name, title=title, status=CheckStatus.SKIPPED, message=reason, blocking=blocking)

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "status": self.status.value,
            "message": self.message,
            "blocking": self.blocking,
            "duration": round(self.duration, 3),
            "hint": self.hint,
            "items": list(self.items),
        }


@dataclass
class GateReport:
    """Ordered results of one gate run."""

    results: list[CheckResult] = field(default_factory=list)
    aborted: bool = False  # fail-fast stopped the run early

    @property
    def passed(self) -> bool:
        return not any(r.blocks_commit for r in self.results)

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.passed else EXIT_BLOCKED

    @property
    def failed(self) -> list[CheckResult]:
        return [r for r in self.results if r.blocks_commit]

    @property
    def warnings(self) -> list[CheckResult]:
        return [
            r for r in self.results
            if r.status == CheckStatus.WARNING
            or (r.status == CheckStatus.FAILED and not r.blocking)
        ]

    @property
    def skipped(self) -> list[CheckResult]:
        return [r for r in self.results if r.status == CheckStatus.SKIPPED]

    @property
    def duration(self) -> float:
        return sum(r.duration for r in self.results)

    def to_json(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "exitCode": self.exit_code,
            "aborted": self.aborted,
            "duration": round(self.duration, 3),
            "results": [r.to_json() for r in self.results],
        }
