"""
Console reporter for gate runs.

Prints a colored status line per check while the gate runs and a summary
table with the verdict at the end.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitgate.gate.domain.enums import CheckStatus
from commitgate.gate.domain.models import CheckResult, GateReport

STATUS_STYLES = {
    CheckStatus.PASSED: ("PASS", "bold green"),
    CheckStatus.FAILED: ("FAIL", "bold red"),
    CheckStatus.WARNING: ("WARN", "bold yellow"),
    CheckStatus.SKIPPED: ("SKIP", "dim"),
}


class ConsoleReporter:
    """Render gate progress and results with rich."""

    def __init__(self, console: Console | None = None, quiet: bool = False):
        self.console = console or Console()
        self.quiet = quiet

    def on_progress(self, event: str, data: dict[str, Any]) -> None:
        """progress_callback for GateRunner."""
        if event == "check_started" and not self.quiet:
            self.console.print(
                f"[bold cyan][{data['index']}/{data['total']}][/bold cyan] {escape(data['title'])} ..."
            )
        elif event == "check_finished":
            self.print_result(data["result"])

    def print_result(self, result: CheckResult) -> None:
        label, style = STATUS_STYLES[result.status]

        if self.quiet and result.status in (CheckStatus.PASSED, CheckStatus.SKIPPED):
            return

        duration = f" [dim]({result.duration:.1f}s)[/dim]" if result.status != CheckStatus.SKIPPED else ""
        self.console.print(
            f"  [{style}]{label}[/{style}] {escape(result.title)}: {escape(result.message)}{duration}"
        )

        if result.status in (CheckStatus.FAILED, CheckStatus.WARNING):
            for item in result.items:
                self.console.print(f"    {escape(item)}", style=style.replace("bold ", ""))
            if result.output:
                self.console.print()
                for line in result.output.splitlines():
                    self.console.print(f"    {escape(line)}", style="dim", highlight=False)
                self.console.print()
            if result.hint:
                self.console.print(f"    [bold]Hint:[/bold] {escape(result.hint)}")

    def print_summary(self, report: GateReport) -> None:
        if not self.quiet:
            table = Table(title="commitgate summary", title_style="bold", show_edge=False)
            table.add_column("Check")
            table.add_column("Status")
            table.add_column("Time", justify="right")
            table.add_column("Details", overflow="fold")

            for result in report.results:
                label, style = STATUS_STYLES[result.status]
                table.add_row(
                    escape(result.title),
                    f"[{style}]{label}[/{style}]",
                    f"{result.duration:.1f}s" if result.status != CheckStatus.SKIPPED else "-",
                    escape(result.message),
                )

            self.console.print()
            self.console.print(table)

        self.console.print()
        if report.passed:
            suffix = f" ({len(report.warnings)} warning(s))" if report.warnings else ""
            self.console.print(f"[bold green]✓ Commit allowed[/bold green]{suffix}")
        else:
            names = ", ".join(r.name for r in report.failed)
            self.console.print(f"[bold red]✗ Commit blocked[/bold red] by: {escape(names)}")
            self.console.print("[dim]Fix the issues above, or bypass once with: git commit --no-verify[/dim]")
