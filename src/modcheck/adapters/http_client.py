"""Wrapper de httpx.

- Estandariza base URL, timeout y headers (User-Agent, Accept, Bearer).
- `transport` permite inyectar `httpx.MockTransport` en tests.
"""

from __future__ import annotations

import httpx

from modcheck.core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    user_id: int,
    token: str,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono apuntando a la API de mod.io del usuario.

    Sin reintentos: cada consulta es un único request.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.api_base_url(user_id),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
