from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from commitgate.services.doctor import DiagnosticStatus, GateDoctor
from commitgate.shared.infrastructure.config import settings

console = Console()


def doctor_cmd(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: .commitgate.yaml in the repository root)",
    ),
) -> None:
    """
    Verify that the hook can run in this repository.

    Checks git, the configuration, the check tools on PATH and the hook itself.
    """
    console.print("[bold cyan]commitgate doctor[/bold cyan] - Running diagnostics...\n")

    doctor = GateDoctor(Path.cwd(), settings, config_path=config)
    diagnostics = doctor.run_all()

    for diagnostic in diagnostics:
        name = escape(diagnostic.name)
        message = escape(diagnostic.message)
        if diagnostic.status == DiagnosticStatus.SUCCESS:
            console.print(f"  [green]✔[/green] {name}: {message}")
        elif diagnostic.status == DiagnosticStatus.WARNING:
            console.print(f"  [yellow]⚠  {name}: {message}[/yellow]")
        else:
            console.print(f"  [red]✘ {name}: {message}[/red]")

    if GateDoctor.is_healthy(diagnostics):
        console.print("\n[bold green]✅ commitgate is ready.[/bold green]")
    else:
        console.print("\n[bold red]⛔ Critical issues found. Fix the errors above before committing.[/bold red]")
        raise typer.Exit(1)
