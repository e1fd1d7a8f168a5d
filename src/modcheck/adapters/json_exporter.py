"""Exportación JSON del reporte.

Formato estable (claves ordenadas, UTF-8) para poder comparar dos ejecuciones.
"""

from __future__ import annotations

import json
from pathlib import Path

from modcheck.core.domain.models import Report


def export_report_json(*, report: Report, output_path: Path) -> Path:
    """Exporta `Report` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    payload["counts"] = {status.value: count for status, count in report.counts().items()}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
