"""Modelos del dominio (Pydantic v2).

- Describen *qué* es la información (referencias, registros remotos,
  clasificaciones), no *cómo* se obtiene.
- Todos son inmutables salvo `Report`, que se construye incrementalmente.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Valores de `status` en mod.io: 0 pendiente, 1 aceptado, 3 borrado.
MODIO_STATUS_DELETED = 3


class ReferenceKind(str, Enum):
    """Forma del token en la lista exportada."""

    URL = "url"
    ID = "id"
    NAME_ID = "name_id"


class ModStatus(str, Enum):
    """Etiqueta de la clasificación de un mod."""

    OK = "ok"
    HIDDEN = "hidden"
    RENAMED = "renamed"
    DELETED = "deleted"
    LOOKUP_FAILED = "lookup_failed"

    def label(self) -> str:
        return self.value.replace("_", " ").upper()


class ModReference(BaseModel):
    """Un token de la lista de mods, ya interpretado."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(
        ...,
        min_length=1,
        description="Token tal y como aparece en la lista (URL, id o name_id).",
    )
    position: int = Field(
        ...,
        ge=1,
        description="Posición (1-based) del token en la lista.",
    )
    kind: ReferenceKind = Field(
        ...,
        description="Forma del token.",
    )
    name_id: str | None = Field(
        default=None,
        description="Slug del mod en el momento de exportar (si el token lo incluye).",
    )
    mod_id: int | None = Field(
        default=None,
        ge=1,
        description="ID numérico del mod (si el token lo incluye).",
    )
    modfile_id: int | None = Field(
        default=None,
        ge=1,
        description="ID del modfile fijado en la URL (informativo).",
    )


class ModRecord(BaseModel):
    """Estado actual de un mod según mod.io."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(..., ge=1)
    name: str = Field(default="")
    name_id: str = Field(..., min_length=1)
    visible: int = Field(default=1, description="1 público, 0 oculto.")
    status: int = Field(default=1)
    profile_url: str = Field(default="")

    @property
    def is_hidden(self) -> bool:
        return self.visible == 0

    @property
    def is_deleted(self) -> bool:
        return self.status == MODIO_STATUS_DELETED


class Classification(BaseModel):
    """Resultado de comparar una referencia con su registro remoto."""

    model_config = ConfigDict(frozen=True)

    status: ModStatus
    old_name: str | None = None
    new_name: str | None = None
    reason: str | None = None
    http_status: int | None = None

    @classmethod
    def ok(cls) -> "Classification":
        return cls(status=ModStatus.OK)

    @classmethod
    def hidden(cls) -> "Classification":
        return cls(status=ModStatus.HIDDEN)

    @classmethod
    def renamed(cls, old_name: str, new_name: str) -> "Classification":
        return cls(status=ModStatus.RENAMED, old_name=old_name, new_name=new_name)

    @classmethod
    def deleted(cls) -> "Classification":
        return cls(status=ModStatus.DELETED, http_status=404)

    @classmethod
    def lookup_failed(cls, reason: str, http_status: int | None = None) -> "Classification":
        return cls(status=ModStatus.LOOKUP_FAILED, reason=reason, http_status=http_status)

    @property
    def flagged(self) -> bool:
        return self.status is not ModStatus.OK

    def describe(self) -> str:
        """Texto corto para tablas/logs."""

        if self.status is ModStatus.RENAMED:
            return f"{self.old_name} -> {self.new_name}"
        if self.status is ModStatus.LOOKUP_FAILED:
            return self.reason or "lookup failed"
        if self.status is ModStatus.DELETED:
            return "mod not found"
        if self.status is ModStatus.HIDDEN:
            return "mod is hidden"
        return ""


class CheckResult(BaseModel):
    """Par (referencia, clasificación), con el registro si lo hubo."""

    model_config = ConfigDict(frozen=True)

    reference: ModReference
    classification: Classification
    record: ModRecord | None = None


class Report(BaseModel):
    """Secuencia ordenada de resultados, en el orden de la lista de entrada."""

    entries: list[CheckResult] = Field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        self.entries.append(result)

    def __len__(self) -> int:
        return len(self.entries)

    def counts(self) -> dict[ModStatus, int]:
        out = {status: 0 for status in ModStatus}
        for entry in self.entries:
            out[entry.classification.status] += 1
        return out

    def flagged(self) -> list[CheckResult]:
        return [entry for entry in self.entries if entry.classification.flagged]
