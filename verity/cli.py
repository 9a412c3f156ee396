#!/usr/bin/env python3
"""
Verity CLI - declarative assertion suites

Usage:
    verity run <suite.yaml> [OPTIONS]
    verity validate <suite.yaml>
    verity info
    verity --version
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .events import Emitter
from .reporting import Reporter
from .suite import OPERATIONS, Check, CheckOutcome, CheckStatus, load_suite, run_suite
from .verbose import setup_logger

app = typer.Typer(
    name="verity",
    help="Verity - declarative assertion suites",
    add_completion=False,
)
console = Console()

_STATUS_STYLE = {
    CheckStatus.PASSED: "green",
    CheckStatus.FAILED: "red",
    CheckStatus.ERROR: "yellow",
    CheckStatus.SKIPPED: "cyan",
}


def version_callback(value: bool):
    if value:
        console.print(f"Verity v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    Verity - declarative assertion suites

    Check values against constraint trees declared in YAML.
    """
    pass


def _print_outcome(check: Check, outcome: CheckOutcome) -> None:
    style = _STATUS_STYLE[outcome.status]
    console.print(f"  [{style}]{outcome.status.value.upper():8}[/{style}] {check.id}", highlight=False)
    if outcome.status != CheckStatus.PASSED and outcome.message:
        for line in outcome.message.splitlines():
            console.print(f"           {line}", markup=False, highlight=False)


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    debug_log: Optional[Path] = typer.Option(
        None, "--debug-log",
        help="Write debug logging to this file"
    ),
):
    """
    Run an assertion suite.

    Evaluate every check in the suite and generate a run report.
    """
    if output not in ("text", "json"):
        console.print(f"[red]❌ Unknown output format:[/red] {output} (use text or json)")
        raise typer.Exit(code=2)

    if debug_log is not None:
        setup_logger(debug_log)

    text_output = output == "text" and not quiet

    if text_output:
        console.print(f"\n📄 Loading suite: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print("\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    if text_output:
        console.print(f"   [green]✅ Valid suite:[/green] {suite.name}")
        console.print(f"\n{'=' * 60}")
        console.print(f"  [bold]Running:[/bold] {suite.name}")
        console.print(f"  [bold]Checks:[/bold] {len(suite.checks)}")
        console.print(f"{'=' * 60}\n")

    emitter = Emitter()
    reporter = Reporter.from_suite(suite)
    emitter.subscribe(reporter)

    suite_run = run_suite(suite, emitter=emitter, progress=_print_outcome if text_output else None)
    report = reporter.report

    if output == "json":
        console.print_json(data=report.to_dict())
    elif not quiet:
        console.print("\n" + report.summary(), markup=False)
    else:
        result = suite_run.result
        console.print(
            f"{suite.name}: {result.passed} passed, {result.failed} failed, "
            f"{result.errors} errors, {result.skipped} skipped"
        )

    if not no_report:
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if text_output:
            console.print(f"\n📁 Report saved: {report_path}")

    raise typer.Exit(code=0 if suite_run.was_successful else 1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and build every constraint without running the suite.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print("\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid suite:[/green] {suite.name}")
    console.print(f"   Checks: {len(suite.checks)}")

    table = Table(title="Checks")
    table.add_column("ID", style="cyan")
    table.add_column("Assertions", style="magenta", justify="right")
    table.add_column("Constraint")

    for check in suite.checks:
        description = check.constraint.to_string()
        if check.skip is not None:
            description = f"(skipped: {check.skip}) {description}"
        table.add_row(check.id, str(check.constraint.count()), description)

    console.print()
    console.print(table)


@app.command()
def info():
    """
    Show information about Verity and the available operations.
    """
    console.print(f"""
[bold]Verity[/bold] v{__version__}

Declarative assertion suites

[bold]Features:[/bold]
  • Composable constraints (all_of, any_of, one_of, not)
  • Structural equality with diffs for mappings, sequences and objects
  • JSON, JSONPath and XML checks
  • Detailed JSON run reports

[bold]Quick Start:[/bold]
  verity run suites/checks.yaml
  verity validate suites/checks.yaml
""")

    table = Table(title="Operations")
    table.add_column("op", style="cyan")
    table.add_column("Required")
    table.add_column("Optional")

    for name, spec in sorted(OPERATIONS.items()):
        required = ", ".join(spec.required)
        if spec.nested:
            required = ", ".join(filter(None, [required, "expect | value"]))
        table.add_row(name, required, ", ".join(spec.optional))

    console.print(table)


if __name__ == "__main__":
    app()
