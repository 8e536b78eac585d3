"""Gate domain enums."""

from enum import Enum


class CheckStatus(str, Enum):
    """
    Outcome of a single check.

    - PASSED: the tool exited 0 / nothing was found
    - FAILED: the check found a problem (blocks the commit if blocking)
    - WARNING: a non-blocking check found a problem
    - SKIPPED: the check did not run (--skip, SKIP env var, fail-fast)
    """

    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warning"
    SKIPPED = "skipped"
