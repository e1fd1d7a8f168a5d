"""Componentes de UI para CLI (Rich).

- Separa los detalles visuales (barra de progreso, tabla, resumen) del comando.
- Todo recibe la `Console` explícitamente; la CLI decide stdout/stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from modcheck.core.domain.models import CheckResult, ModStatus, Report

STATUS_STYLES: dict[ModStatus, str] = {
    ModStatus.OK: "green",
    ModStatus.HIDDEN: "yellow",
    ModStatus.RENAMED: "magenta",
    ModStatus.DELETED: "bold red",
    ModStatus.LOOKUP_FAILED: "red",
}


def build_progress(console: Console) -> Progress:
    """Barra de progreso estilo `Checking ⠋ [=====] 3/10`."""

    columns = [
        TextColumn("[bold cyan]{task.description:>12}"),
        SpinnerColumn(style="blue"),
        BarColumn(bar_width=57),
        MofNCompleteColumn(),
    ]
    if console.width > 80:
        columns.append(TextColumn("{task.fields[current]}", style="dim"))
    return Progress(*columns, console=console, transient=True)


def format_flagged_line(result: CheckResult) -> Text:
    """Línea que se imprime sobre la barra cuando un mod queda marcado."""

    classification = result.classification
    code = "-" if classification.http_status is None else str(classification.http_status)
    return Text.assemble(
        (f"{classification.status.label():>13}", STATUS_STYLES[classification.status]),
        " ",
        (f"{code:>3}", "bold yellow"),
        " ",
        result.reference.raw,
    )


def build_report_table(report: Report) -> Table:
    table = Table(title="Mod check")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Mod", style="cyan", overflow="fold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Details", style="white", overflow="fold")

    for entry in report.entries:
        status = entry.classification.status
        table.add_row(
            str(entry.reference.position),
            entry.reference.raw,
            Text(status.label(), style=STATUS_STYLES[status]),
            entry.classification.describe(),
        )
    return table


def build_summary(report: Report) -> Text:
    """Resumen con el conteo por clasificación (incluye los ceros)."""

    counts = report.counts()
    body = Text()
    body.append(f"{len(report)} mods checked", style="bold")
    for status in ModStatus:
        body.append(" | ")
        body.append(f"{status.label()}: {counts[status]}", style=STATUS_STYLES[status])
    return body
