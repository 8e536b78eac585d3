"""
commitgate - pre-commit gate for git repositories.

Runs a formatting check, the test suite and an untracked-file scan
before allowing a commit.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
