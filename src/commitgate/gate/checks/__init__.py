"""Built-in gate checks, in the order the gate runs them."""

from commitgate.gate.checks.command_check import CommandCheck, FormatCheck, TestCheck
from commitgate.gate.checks.untracked_check import UntrackedCheck

CHECK_ORDER = ("format", "tests", "untracked")

__all__ = [
    "CHECK_ORDER",
    "CommandCheck",
    "FormatCheck",
    "TestCheck",
    "UntrackedCheck",
]
