from commitgate.shared.domain.exceptions import (
    CommitGateError,
    ConfigurationError,
    GitError,
    HookInstallError,
)

__all__ = [
    "CommitGateError",
    "ConfigurationError",
    "GitError",
    "HookInstallError",
]
