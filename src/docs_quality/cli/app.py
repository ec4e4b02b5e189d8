"""Root CLI application."""

from __future__ import annotations

import typer

from docs_quality.cli.check import check

app = typer.Typer(
    name="docs-quality",
    help=(
        "Documentation quality gate: formatter and markdown lint checks with a PR report. "
        "Runs `check` when no command is given."
    ),
    invoke_without_command=True,  # bare `docs-quality` runs the check
)

app.command("check")(check)


@app.callback()
def _root(ctx: typer.Context) -> None:
    from docs_quality.config.settings import get_settings
    from docs_quality.utils.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.log_json)

    if ctx.invoked_subcommand is None:
        ctx.invoke(check)


def main() -> None:
    app()
