"""Gate module - checks run before a commit is allowed."""

from commitgate.gate.application.runner import GateRunner
from commitgate.gate.domain.check import CheckContext, GateCheck
from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import CheckResult, GateReport

__all__ = [
    "CheckContext",
    "CheckResult",
    "CheckStatus",
    "GateCheck",
    "GateReport",
    "GateRunner",
]
