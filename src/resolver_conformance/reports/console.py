"""Console reporter for certification output using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from resolver_conformance.testing.models import RunResult, SuiteExecution, SuiteStatus


_STATUS_CONFIG: dict[SuiteStatus, tuple[str, str, str]] = {
    SuiteStatus.PASSED: ("✓", "green", "PASSED"),
    SuiteStatus.FAILED: ("✗", "red", "FAILED"),
    SuiteStatus.ERROR: ("!", "yellow", "ERROR"),
    SuiteStatus.CRASHED: ("!", "magenta", "CRASHED"),
}


class ConsoleReporter:
    """Prints one line per suite and a certification summary."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity
        self._failures: list[SuiteExecution] = []

    def on_suite_complete(self, execution: SuiteExecution) -> None:
        symbol, color, label = _STATUS_CONFIG[execution.status]
        if execution.status.is_failure:
            self._failures.append(execution)
        if self.verbosity < 0 and not execution.status.is_failure:
            return
        duration = f"[dim]({execution.duration_ms:.1f}ms)[/dim]"
        self.console.print(
            f"  [{color}]{symbol}[/{color}] {escape(execution.suite)} {duration} [{color}]{label}[/{color}]"
        )
        if execution.status.is_failure and self.verbosity <= 0:
            self.console.print(f"    [{color}]{escape(execution.message)}[/{color}]")

    def on_run_complete(self, result: RunResult) -> None:
        if self.verbosity > 0 and self._failures:
            self._print_failures()

        self.console.print()
        parts = []
        if result.passed:
            parts.append(f"[green]{result.passed} passed[/green]")
        failed = result.failed - result.crashed
        if failed:
            parts.append(f"[red]{failed} failed[/red]")
        if result.crashed:
            parts.append(f"[magenta]{result.crashed} crashed[/magenta]")
        summary = ", ".join(parts) if parts else "[dim]0 suites[/dim]"
        self.console.print(f"[bold]{summary}[/bold] in {result.total_duration_ms:.0f}ms")

        if result.certified:
            self.console.print("[bold green]All resolver tests passed[/bold green]")
        else:
            self.console.print(f"[bold red]{result.failed} resolver test(s) failed[/bold red]")

    def _print_failures(self) -> None:
        for execution in self._failures:
            _, color, label = _STATUS_CONFIG[execution.status]
            if execution.result is not None:
                lines = [str(f) for f in execution.result.failures]
            else:
                lines = [execution.message]
            self.console.print(
                Panel(
                    "\n".join(escape(line) for line in lines) or " ",
                    title=f"{execution.suite} {label}",
                    title_align="left",
                    border_style=color,
                    expand=True,
                    padding=(1, 1),
                )
            )
