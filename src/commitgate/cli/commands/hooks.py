"""
CLI commands for Git hook management.

Installs, removes and shows the commitgate pre-commit hook.
"""

import typer
from rich.console import Console

from commitgate.gate.domain.models import EXIT_BLOCKED, EXIT_ERROR
from commitgate.infrastructure.hooks.installer import HookInstaller
from commitgate.shared.domain.exceptions import CommitGateError

app = typer.Typer(
    name="hooks",
    help="Git hook management (install, uninstall, list)",
    no_args_is_help=True,
)
console = Console()


def _require_git_dir():
    git_dir = HookInstaller.find_git_dir()
    if git_dir is None:
        console.print("❌ Error: Not a git repository", style="red")
        raise typer.Exit(EXIT_ERROR)
    return git_dir


@app.command(name="install")
def install_cmd(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Replace an existing hook (it is kept as pre-commit.commitgate.bak)",
    ),
):
    """Install the commitgate pre-commit hook."""
    console.print("Installing commitgate pre-commit hook...")

    git_dir = _require_git_dir()

    try:
        result = HookInstaller.install(git_dir=git_dir, force=force)
    except CommitGateError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(EXIT_ERROR)

    if result.installed:
        console.print(f"✓ {result.hook_name}: {result.message}", style="green")
    else:
        console.print(f"⚠️  {result.hook_name}: {result.message}", style="yellow")
        raise typer.Exit(EXIT_BLOCKED)


@app.command(name="uninstall")
def uninstall_cmd():
    """Uninstall the commitgate pre-commit hook."""
    console.print("Uninstalling commitgate pre-commit hook...")

    git_dir = _require_git_dir()

    try:
        result = HookInstaller.uninstall(git_dir=git_dir)
    except CommitGateError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(EXIT_ERROR)

    if result.already_existed:
        console.print(f"✓ {result.hook_name}: {result.message}", style="green")
    else:
        console.print(f"⚠️  {result.hook_name}: {result.message}", style="yellow")


@app.command(name="list")
def list_cmd():
    """Show whether the pre-commit hook is installed."""
    console.print("commitgate Git Hooks Status\n")

    git_dir = _require_git_dir()
    is_installed = HookInstaller.is_installed(git_dir)

    status = "✓ Installed" if is_installed else "✗ Not installed"
    color = "green" if is_installed else "dim"
    console.print(f"{'pre-commit':15} {status}", style=color)
    console.print(f"hooks dir: {HookInstaller.hooks_dir(git_dir)}", style="dim", highlight=False)


__all__ = ["app"]
