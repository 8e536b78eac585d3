"""
Project configuration models (.commitgate.yaml).

Validated with pydantic; unknown keys are rejected so typos in the
configuration fail loudly instead of silently disabling a check.
"""

import shlex
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Preset(str, Enum):
    """Toolchain presets providing default check commands."""

    PYTHON = "python"
    RUST = "rust"


class CommandCheckConfig(BaseModel):
    """A check that passes when its command exits with status 0."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    command: list[str] = Field(default_factory=list)
    title: str | None = None
    blocking: bool = True
    timeout: float | None = Field(default=None, gt=0)
    fix_hint: str | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("command", mode="before")
    @classmethod
    def _split_command(cls, value: Any) -> Any:
        # "cargo fmt -- --check" is accepted as well as a list
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @model_validator(mode="after")
    def _require_command_when_enabled(self) -> "CommandCheckConfig":
        if self.enabled and not self.command:
            raise ValueError("command must not be empty for an enabled check")
        return self


class UntrackedCheckConfig(BaseModel):
    """Untracked-file scan settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    title: str | None = None
    blocking: bool = True
    patterns: list[str] = Field(default_factory=lambda: ["*"])
    exclude: list[str] = Field(default_factory=list)


class ChecksConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: CommandCheckConfig
    tests: CommandCheckConfig
    untracked: UntrackedCheckConfig = Field(default_factory=UntrackedCheckConfig)


class GateConfig(BaseModel):
    """Effective gate configuration after presets are applied."""

    model_config = ConfigDict(extra="forbid")

    preset: Preset = Preset.PYTHON
    fail_fast: bool = True
    output_tail_lines: int = Field(default=40, ge=0)
    checks: ChecksConfig

    def to_dict(self) -> dict[str, Any]:
        """Plain dict suitable for YAML output."""
        return self.model_dump(mode="json", exclude_none=True)
