"""Default check commands per toolchain preset."""

from typing import Any

from commitgate.config.models import Preset

PRESETS: dict[Preset, dict[str, Any]] = {
    Preset.PYTHON: {
        "format": {
            "command": ["black", "--check", "--diff", "."],
            "fix_hint": "Run: black .",
        },
        "tests": {
            "command": ["pytest", "-q"],
            "fix_hint": "Run: pytest",
        },
        "untracked": {
            "patterns": ["*"],
        },
    },
    Preset.RUST: {
        "format": {
            "command": ["cargo", "fmt", "--", "--check"],
            "fix_hint": "Run: cargo fmt",
        },
        "tests": {
            "command": ["cargo", "test"],
            "fix_hint": "Run: cargo test",
        },
        "untracked": {
            "patterns": ["*"],
        },
    },
}


def preset_checks(preset: Preset) -> dict[str, Any]:
    """Return a fresh copy of the preset's check defaults."""
    return {name: dict(values) for name, values in PRESETS[preset].items()}
