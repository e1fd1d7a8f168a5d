"""Contrato de una fuente de mods.

Reglas:
- `lookup` es síncrono y bloqueante: un request por referencia, en orden.
- "No existe" se expresa devolviendo `None`, nunca con una excepción.
- Cualquier otro fallo de la consulta se expresa con `ModLookupError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from modcheck.core.domain.models import ModRecord, ModReference


@runtime_checkable
class ModSource(Protocol):
    """Contrato mínimo para consultar el estado remoto de un mod."""

    def authenticate(self) -> None:
        """Verifica las credenciales; lanza `AuthenticationError` si se rechazan."""

        ...

    def lookup(self, reference: ModReference) -> ModRecord | None:
        """Devuelve el registro actual del mod, o `None` si no existe."""

        ...
