"""Errores del dominio.

Dos niveles:
- `SetupError`: fatales, abortan antes de consultar ningún mod (la CLI sale con 1).
- `ModLookupError`: por mod; el reconciliador los registra como LookupFailed.
"""

from __future__ import annotations


class ModCheckError(Exception):
    """Base de todos los errores de modcheck."""


class SetupError(ModCheckError):
    """Error fatal de preparación (ficheros, credenciales)."""


class ModListError(SetupError):
    """La lista de mods no se puede leer o contiene tokens inválidos."""


class TokenFileError(SetupError):
    """El fichero de token no se puede leer o está vacío."""


class AuthenticationError(SetupError):
    """mod.io rechazó el token (o no se pudo verificar)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ModLookupError(ModCheckError):
    """Fallo al consultar un mod concreto; no aborta el resto del chequeo."""

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
