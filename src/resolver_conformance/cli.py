"""Command-line interface for resolver certification."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from resolver_conformance.config import ConformanceSettings
from resolver_conformance.core import load_resolver
from resolver_conformance.exceptions import ResolverLoadError
from resolver_conformance.reports import ConsoleReporter, build_report, write_badge, write_report
from resolver_conformance.testing import SuiteOrchestrator
from resolver_conformance.tracing import init_tracing


def _configure_logging(verbose: int, console: Console) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command()
@click.option("--suite", "suites", multiple=True, help="Suite to run (repeatable). Defaults depend on the mode.")
@click.option("--resolver", "resolver_ref", envvar="OLANG_RESOLVER", help="Resolver: module:attr or path/to/file.py")
@click.option("--kernel", "kernel_ref", help="Kernel module to certify; acts as resolver and workflow parser")
@click.option("--suites-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory holding the suites")
@click.option("--json", "as_json", is_flag=True, help="Print and write conformance-report.json")
@click.option("--badge", is_flag=True, help="Write badges/certified.svg")
@click.option("--trace", is_flag=True, help="Record OpenTelemetry spans to a JSONL file")
@click.option("-v", "--verbose", count=True, help="Increase verbosity")
@click.option("-q", "--quiet", is_flag=True, help="Only report failing suites")
def main(
    suites: tuple[str, ...],
    resolver_ref: str | None,
    kernel_ref: str | None,
    suites_dir: Path | None,
    as_json: bool,
    badge: bool,
    trace: bool,
    verbose: int,
    quiet: bool,
) -> None:
    """Certify a resolver against the conformance suites."""
    load_dotenv(Path.cwd() / ".env")
    console = Console(stderr=as_json)
    _configure_logging(verbose, console)

    overrides: dict[str, object] = {}
    if suites:
        overrides["suites"] = list(suites)
    if resolver_ref:
        overrides["resolver"] = resolver_ref
    if kernel_ref:
        overrides["kernel"] = kernel_ref
    if suites_dir:
        overrides["suites_dir"] = suites_dir
    if trace:
        overrides["trace"] = True
    settings = ConformanceSettings().model_copy(update=overrides)

    reference = settings.resolver or settings.kernel
    if not reference:
        console.print("[red]OLANG_RESOLVER environment variable is not set[/red]")
        sys.exit(1)

    try:
        resolver = load_resolver(reference)
    except ResolverLoadError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if settings.trace:
        init_tracing(output_path=settings.trace_output)

    selected = settings.selected_suites()
    reporter = ConsoleReporter(console=console, verbosity=-1 if quiet else verbose)
    orchestrator = SuiteOrchestrator(
        resolver,
        suites_dir=settings.suites_dir,
        reporters=[reporter],
        trace=settings.trace,
    )

    try:
        result = asyncio.run(orchestrator.run(selected))
    except Exception as e:
        console.print("[bold red]Resolver test runner crashed[/bold red]")
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        sys.exit(1)

    if as_json:
        report = build_report(result, selected)
        click.echo(json.dumps(report, indent=2))
        write_report(report, settings.report_path)

    if badge:
        path = write_badge(result.certified, settings.badge_dir)
        console.print(f"Badge written to {path}")

    sys.exit(0 if result.certified else 1)


if __name__ == "__main__":
    main()
