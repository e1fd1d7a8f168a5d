"""Fuente mod.io (implementa `ModSource`).

Endpoints usados (API v1, base `https://u-{user_id}.modapi.io/v1`):
- `GET /me`: verificación del token.
- `GET /games/{game_id}/mods/{mod_id}`: cuando la referencia trae ID.
- `GET /games/{game_id}/mods?name_id=<slug>`: cuando solo hay name_id.

Un 404 (o una lista vacía) significa "no existe" y se devuelve `None`; el
resto de fallos se convierten en `ModLookupError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from modcheck.core.config import AppSettings
from modcheck.core.domain.models import ModRecord, ModReference
from modcheck.core.errors import AuthenticationError, ModLookupError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Extrae `error.message` del cuerpo JSON de mod.io si está disponible."""

    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return response.reason_phrase or f"HTTP {response.status_code}"


class ModioSource:
    """Consulta el estado de mods en mod.io, un request por referencia."""

    def __init__(self, client: httpx.Client, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    def authenticate(self) -> None:
        try:
            response = self._client.get("/me")
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"could not reach mod.io to verify the access token: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"mod.io rejected the access token ({response.status_code}): {_error_message(response)}",
                status_code=response.status_code,
            )
        if response.is_error:
            raise AuthenticationError(
                f"mod.io returned {response.status_code} while verifying the access token: "
                f"{_error_message(response)}",
                status_code=response.status_code,
            )
        logger.debug("access token accepted")

    def lookup(self, reference: ModReference) -> ModRecord | None:
        if reference.mod_id is not None:
            return self._lookup_by_id(reference)
        return self._lookup_by_name_id(reference)

    def _get(self, reference: ModReference, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            return self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.debug("request failed for <%s>: %r", reference.raw, exc)
            raise ModLookupError(f"request failed: {exc}") from exc

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ModLookupError("invalid JSON from mod.io", status_code=response.status_code) from exc

    def _record(self, data: Any, status_code: int) -> ModRecord:
        try:
            return ModRecord.model_validate(data)
        except ValidationError as exc:
            raise ModLookupError(
                f"unexpected mod payload: {exc.error_count()} validation error(s)",
                status_code=status_code,
            ) from exc

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_error:
            raise ModLookupError(
                f"mod.io error: {_error_message(response)}",
                status_code=response.status_code,
            )

    def _lookup_by_id(self, reference: ModReference) -> ModRecord | None:
        path = f"/games/{self._settings.game_id}/mods/{reference.mod_id}"
        response = self._get(reference, path)
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return self._record(self._json(response), response.status_code)

    def _lookup_by_name_id(self, reference: ModReference) -> ModRecord | None:
        path = f"/games/{self._settings.game_id}/mods"
        response = self._get(reference, path, params={"name_id": reference.name_id})
        if response.status_code == 404:
            return None
        self._raise_for_status(response)

        payload = self._json(response)
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ModLookupError("unexpected mod list payload", status_code=response.status_code)
        if not data:
            return None
        if len(data) > 1:
            raise ModLookupError("ambiguous mod URL")
        return self._record(data[0], response.status_code)
