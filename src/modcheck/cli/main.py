"""CLI principal (Typer).

Uso:
    modcheck --id <USER_ID> --access-token <TOKEN_FILE> <MOD_LIST>

stdout recibe el reporte; stderr recibe progreso, logs y errores fatales.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from modcheck.adapters.error_log import write_error_log
from modcheck.adapters.http_client import build_client
from modcheck.adapters.json_exporter import export_report_json
from modcheck.adapters.modio import ModioSource
from modcheck.cli.ui_components import (
    build_progress,
    build_report_table,
    build_summary,
    format_flagged_line,
)
from modcheck.core.config import AppSettings
from modcheck.core.domain.models import Report
from modcheck.core.errors import SetupError
from modcheck.core.logging import configure_logging
from modcheck.core.mod_list import load_mod_list, load_token
from modcheck.core.services.reconciler import ReconcileHooks, reconcile

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Check a Mint mod list against mod.io and flag hidden, renamed or deleted mods.",
)


def run_check(
    *,
    settings: AppSettings,
    mod_list: Path,
    user_id: int,
    access_token: Path,
    console: Console,
) -> Report:
    """Lee entradas, autentica y consulta cada mod. Los `SetupError` se propagan."""

    token = load_token(access_token)
    references = load_mod_list(mod_list, game_slug=settings.game_slug)
    if not references:
        logger.info("mod list `%s` is empty, nothing to check", mod_list)
        return Report()

    logger.info("checking %d mods for user %d", len(references), user_id)

    with build_client(settings, user_id=user_id, token=token) as client:
        source = ModioSource(client, settings)
        source.authenticate()

        with build_progress(console) as progress:
            task = progress.add_task("Checking", total=None, current="")

            def on_start(total: int) -> None:
                progress.update(task, total=total)

            def on_result(result) -> None:
                progress.update(task, advance=1, current=result.reference.raw)

            def on_flagged(result) -> None:
                progress.console.print(format_flagged_line(result))

            hooks = ReconcileHooks(on_start=on_start, on_result=on_result, on_flagged=on_flagged)
            return reconcile(source, references, hooks=hooks)


@app.command()
def check(
    mod_list: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Mod list exported by Mint (URLs or ids separated by whitespace).",
    ),
    user_id: int = typer.Option(..., "--id", min=1, help="mod.io user id."),
    access_token: Path = typer.Option(
        ...,
        "--access-token",
        dir_okay=False,
        help="File containing a mod.io OAuth2 access token.",
    ),
    json_path: Path | None = typer.Option(None, "--json", dir_okay=False, help="Also write the report as JSON."),
    error_log: Path | None = typer.Option(
        None,
        "--error-log",
        dir_okay=False,
        help="Also write flagged mods to a plain-text error log.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Check every mod in MOD_LIST against mod.io."""

    out = Console()
    err = Console(stderr=True)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        err.print(f"[bold red]error:[/bold red] invalid configuration: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    configure_logging("DEBUG" if verbose else settings.log_level, console=err)

    try:
        report = run_check(
            settings=settings,
            mod_list=mod_list,
            user_id=user_id,
            access_token=access_token,
            console=err,
        )
    except SetupError as exc:
        err.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if report.entries:
        out.print(build_report_table(report))
    out.print(build_summary(report))

    if json_path is not None:
        export_report_json(report=report, output_path=json_path)
        err.print(f"[green]Report written to:[/green] {escape(str(json_path))}")
    if error_log is not None:
        write_error_log(report=report, output_path=error_log)
        err.print(f"[green]Error log written to:[/green] {escape(str(error_log))}")


def run() -> None:
    app()
