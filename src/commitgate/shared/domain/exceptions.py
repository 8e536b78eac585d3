"""
Domain exceptions for commitgate.

All errors that stop the gate from running inherit from CommitGateError.
A failing check is a result, not an exception.
"""


class CommitGateError(Exception):
    """Base class for all commitgate exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(CommitGateError):
    """Raised when .commitgate.yaml is unreadable, invalid or inconsistent."""

    pass


class GitError(CommitGateError):
    """Raised when git is missing or the directory is not a work tree."""

    pass


class HookInstallError(CommitGateError):
    """Raised when a hook script cannot be written or removed."""

    pass
