"""
Infrastructure module for commitgate.

Provides Git hook installation so the gate runs on every `git commit`.
"""

from commitgate.infrastructure.hooks.installer import HookInstaller

__all__ = [
    "HookInstaller",
]
