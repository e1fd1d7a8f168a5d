"""Log de errores en texto plano.

Una línea por mod marcado: `ERROR {status:<10} {referencia}`. La columna de
estado es el código HTTP si existe; si no, `---`, `ambiguous`, `hidden` o
`renamed`.
"""

from __future__ import annotations

from pathlib import Path

from modcheck.core.domain.models import CheckResult, ModStatus, Report


def status_column(result: CheckResult) -> str:
    classification = result.classification
    if classification.status is ModStatus.HIDDEN:
        return "hidden"
    if classification.status is ModStatus.RENAMED:
        return "renamed"
    if classification.http_status is not None:
        return str(classification.http_status)
    if classification.reason and classification.reason.startswith("ambiguous"):
        return "ambiguous"
    return "---"


def format_error_line(result: CheckResult) -> str:
    return f"ERROR {status_column(result):<10} {result.reference.raw}"


def write_error_log(*, report: Report, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as out:
        for result in report.flagged():
            out.write(format_error_line(result) + "\n")
    return output_path
