"""CLI command running the documentation quality gate."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from docs_quality.quality.models import QualityReport

console = Console(stderr=True)


def check(
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Also write the report to this file")
    ] = None,
    post: Annotated[
        bool, typer.Option("--post/--no-post", help="Post the report as a PR comment")
    ] = False,
    issue_number: Annotated[
        Optional[int], typer.Option("--issue-number", help="PR/issue to comment on")
    ] = None,
    step_outputs: Annotated[
        bool,
        typer.Option("--step-outputs/--no-step-outputs", help="Append results to $GITHUB_OUTPUT"),
    ] = False,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", min=0.1, help="Per-check timeout in seconds")
    ] = None,
) -> None:
    """Run the format and lint checks and print the Markdown report."""
    from docs_quality.config.settings import get_settings
    from docs_quality.output import ConsoleSink, FileSink, ReportSinkError, emit_report
    from docs_quality.output.github import (
        CommentSink,
        GitHubCommentPoster,
        resolve_issue_number,
        write_step_outputs,
    )
    from docs_quality.quality.report import evaluate, exit_code, final_status_lines, render
    from docs_quality.quality.runner import build_checks, run_all_checks

    settings = get_settings()

    results = run_all_checks(build_checks(settings), timeout=timeout or settings.timeout_seconds)
    report = evaluate(results)
    markdown = render(report)

    sinks = [ConsoleSink()]
    report_file = output or settings.report_file
    if report_file is not None:
        sinks.append(FileSink(report_file))

    poster = None
    warnings: list[str] = []
    if post:
        number = issue_number or resolve_issue_number(settings.github)
        if number is None:
            warnings.append("No PR/issue number available; comment not posted.")
        else:
            poster = GitHubCommentPoster(settings.github)
            sinks.append(CommentSink(poster, number))

    try:
        failures = emit_report(markdown, sinks)
    finally:
        if poster is not None:
            poster.close()
    warnings.extend(str(f) for f in failures)

    if step_outputs:
        if settings.github.output is None:
            warnings.append("GITHUB_OUTPUT is not set; step outputs not written.")
        else:
            try:
                write_step_outputs(report, settings.github.output)
            except ReportSinkError as e:
                warnings.append(str(e))

    _print_summary(report)
    for line in final_status_lines(report):
        typer.echo(line, err=True)
    for warning in warnings:
        typer.echo(f"Warning: {warning}", err=True)

    raise typer.Exit(exit_code(report))


def _print_summary(report: QualityReport) -> None:
    """Print per-check outcomes as a Rich table on stderr."""
    table = Table(title="Documentation Quality", show_header=True, header_style="bold")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail")
    table.add_column("Issues")

    for result in report.results:
        style = "green" if result.passed else "red"
        table.add_row(
            result.name,
            f"[{style}]{'PASS' if result.passed else 'FAIL'}[/{style}]",
            result.detail,
            ", ".join(result.issues) if result.issues else "-",
        )

    console.print(table)
