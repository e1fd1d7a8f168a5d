"""Modelos y entidades del dominio.

- Estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo referencias, registros y clasificaciones.
"""

from modcheck.core.domain.models import (
    CheckResult,
    Classification,
    ModRecord,
    ModReference,
    ModStatus,
    ReferenceKind,
    Report,
)

__all__ = [
    "CheckResult",
    "Classification",
    "ModRecord",
    "ModReference",
    "ModStatus",
    "ReferenceKind",
    "Report",
]
