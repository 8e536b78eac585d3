"""
Configuration loader for .commitgate.yaml.

Functions:
- load_gate_config: Load configuration, applying the preset's defaults
- dump_gate_config: Render an effective configuration as YAML
- write_starter_config: Create a starter configuration file
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from commitgate.config.models import GateConfig, Preset
from commitgate.config.presets import preset_checks
from commitgate.shared.domain.exceptions import ConfigurationError
from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _merge_checks(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay per-check keys from the file on top of the preset defaults."""
    merged = {name: dict(values) for name, values in defaults.items()}
    for name, values in overrides.items():
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigurationError(
                f"checks.{name} must be a mapping, got {type(values).__name__}",
                context={"check": name},
            )
        merged.setdefault(name, {}).update(values)
    return merged


def build_gate_config(data: dict[str, Any] | None, source: str = "<defaults>") -> GateConfig:
    """
    Validate raw configuration data into a GateConfig.

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    data = dict(data or {})

    raw_preset = data.get("preset", Preset.PYTHON.value)
    try:
        preset = Preset(raw_preset)
    except ValueError:
        valid = ", ".join(p.value for p in Preset)
        raise ConfigurationError(
            f"Unknown preset '{raw_preset}' in {source} (valid: {valid})",
            context={"source": source},
        ) from None

    checks = data.get("checks") or {}
    if not isinstance(checks, dict):
        raise ConfigurationError(f"'checks' must be a mapping in {source}", context={"source": source})

    data["preset"] = preset
    data["checks"] = _merge_checks(preset_checks(preset), checks)

    try:
        return GateConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {source}:\n{e}",
            context={"source": source, "errors": e.error_count()},
        ) from e


def load_gate_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
    config_name: str = ".commitgate.yaml",
) -> GateConfig:
    """
    Load gate configuration from a YAML file.

    Args:
        config_path: Explicit configuration file (must exist)
        project_root: Repository root (uses project_root / config_name)
        config_name: File name looked up under project_root

    Returns:
        GateConfig loaded from file, or the python preset defaults when
        no file exists under project_root

    Raises:
        ConfigurationError: If YAML is invalid or fails validation
    """
    explicit = config_path is not None
    if config_path is None:
        if project_root is None:
            raise ConfigurationError("Either config_path or project_root must be provided")
        config_path = project_root / config_name

    if not config_path.exists():
        if explicit:
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                context={"path": str(config_path)},
            )
        logger.debug("config_file_missing_using_defaults", path=str(config_path))
        return build_gate_config(None)

    try:
        content = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content) if content.strip() else {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}", context={"path": str(config_path)}) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}", context={"path": str(config_path)}) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Top level of {config_path} must be a mapping",
            context={"path": str(config_path)},
        )

    config = build_gate_config(data, source=str(config_path))
    logger.debug("config_loaded", path=str(config_path), preset=config.preset.value)
    return config


def dump_gate_config(config: GateConfig) -> str:
    """Render the effective configuration as YAML."""
    return yaml.safe_dump(config.to_dict(), sort_keys=False, default_flow_style=False)


def write_starter_config(path: Path, preset: Preset = Preset.PYTHON, force: bool = False) -> Path:
    """
    Write a starter .commitgate.yaml with the preset's checks spelled out.

    Raises:
        ConfigurationError: If the file exists and force is False
    """
    if path.exists() and not force:
        raise ConfigurationError(
            f"{path} already exists (use --force to overwrite)",
            context={"path": str(path)},
        )

    config = build_gate_config({"preset": preset.value})
    header = (
        "# commitgate configuration\n"
        "# Checks run in order: format, tests, untracked.\n"
        "# Skip checks for one commit with SKIP=tests git commit ...\n"
    )
    path.write_text(header + dump_gate_config(config), encoding="utf-8")
    logger.info("starter_config_written", path=str(path), preset=preset.value)
    return path
