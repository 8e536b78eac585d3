"""Project configuration (.commitgate.yaml) models and loader."""

from commitgate.config.loader import (
    build_gate_config,
    dump_gate_config,
    load_gate_config,
    write_starter_config,
)
from commitgate.config.models import (
    ChecksConfig,
    CommandCheckConfig,
    GateConfig,
    Preset,
    UntrackedCheckConfig,
)

__all__ = [
    "ChecksConfig",
    "CommandCheckConfig",
    "GateConfig",
    "Preset",
    "UntrackedCheckConfig",
    "build_gate_config",
    "dump_gate_config",
    "load_gate_config",
    "write_starter_config",
]
