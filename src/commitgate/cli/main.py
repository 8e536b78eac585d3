"""
commitgate CLI
Main entry point for the command-line interface

Usage:
    commitgate run                  # Run the checks (what the hook does)
    commitgate hooks install        # Install the pre-commit hook
    commitgate init --preset rust   # Write a starter .commitgate.yaml
    commitgate config show          # Show the effective configuration
    commitgate doctor               # Diagnose the setup
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from commitgate import __version__
from commitgate.cli.commands import config, doctor, hooks, run
from commitgate.shared.domain.exceptions import GitError
from commitgate.shared.infrastructure.git import GitHelper
from commitgate.shared.infrastructure.logging import configure_logging

app = typer.Typer(
    name="commitgate",
    help="commitgate - format, test and untracked-file checks before every commit",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

# Register commands
app.command(name="run")(run.run_cmd)
app.command(name="init")(config.init_cmd)
app.command(name="doctor")(doctor.doctor_cmd)
app.add_typer(hooks.app, name="hooks", help="Git hook management (install, uninstall, list)")
app.add_typer(config.app, name="config", help="Inspect commitgate configuration")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
):
    """Configure logging before any command runs."""
    configure_logging(level="DEBUG" if verbose else None)


@app.command()
def version():
    """Show commitgate version information"""
    try:
        describe = GitHelper(Path.cwd()).describe()
    except GitError:
        describe = None

    lines = [
        "[bold cyan]commitgate[/bold cyan]",
        f"[dim]Version:[/dim] {__version__}",
    ]
    if describe:
        lines.append(f"[dim]Repository:[/dim] {describe}")

    console.print(Panel.fit("\n".join(lines), title="About commitgate", border_style="cyan"))


def main():
    """Main entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
