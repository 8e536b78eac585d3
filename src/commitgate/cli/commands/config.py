"""Configuration commands: `commitgate init` and `commitgate config show`."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from commitgate.config.loader import dump_gate_config, load_gate_config, write_starter_config
from commitgate.config.models import Preset
from commitgate.gate.domain.models import EXIT_ERROR
from commitgate.shared.domain.exceptions import CommitGateError, GitError
from commitgate.shared.infrastructure.config import settings
from commitgate.shared.infrastructure.git import GitHelper

app = typer.Typer(
    name="config",
    help="Inspect commitgate configuration",
    no_args_is_help=True,
)
console = Console()


def _project_root() -> Path:
    """Repository root, or the current directory outside a repository."""
    try:
        return GitHelper(Path.cwd()).repo_root()
    except GitError:
        return Path.cwd()


def init_cmd(
    preset: Preset = typer.Option(
        Preset.PYTHON,
        "--preset",
        "-p",
        help="Toolchain preset for the default check commands",
        case_sensitive=False,
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing configuration file"),
):
    """Write a starter .commitgate.yaml in the repository root."""
    path = _project_root() / settings.config_file

    try:
        write_starter_config(path, preset=preset, force=force)
    except CommitGateError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(EXIT_ERROR)

    console.print(f"✓ Configuration written: {path}", style="green")
    console.print("\nNext steps:")
    console.print(f"1. Review the check commands in {path.name}")
    console.print("2. Install the hook: commitgate hooks install")
    console.print("3. Try it without committing: commitgate run")


@app.command(name="show")
def show_cmd(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: .commitgate.yaml in the repository root)",
    ),
):
    """Print the effective configuration (preset defaults applied) as YAML."""
    try:
        gate_config = load_gate_config(
            config_path=config,
            project_root=_project_root(),
            config_name=settings.config_file,
        )
    except CommitGateError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(EXIT_ERROR)

    typer.echo(dump_gate_config(gate_config), nl=False)


__all__ = ["app", "init_cmd"]
