"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (HTTP/mod.io) y el logging leen de aquí sus defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "modcheck"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "modcheck"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "modcheck"
    return Path.home() / ".config" / "modcheck"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todos los campos se pueden sobreescribir con `MODCHECK_<CAMPO>`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MODCHECK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url_template: str = Field(
        default="https://u-{user_id}.modapi.io/v1",
        min_length=8,
        description="Base URL de la API de mod.io; `{user_id}` se sustituye por --id.",
    )
    game_id: int = Field(
        default=2475,
        ge=1,
        description="ID del juego en mod.io (2475 = Deep Rock Galactic).",
    )
    game_slug: str = Field(
        default="drg",
        min_length=1,
        description="Slug del juego en las URLs públicas (https://mod.io/g/<slug>/m/...).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="modcheck/0.2 (+https://mod.io)",
        min_length=1,
        description="User-Agent para las peticiones a mod.io.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para stderr (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def api_base_url(self, user_id: int) -> str:
        return self.api_url_template.format(user_id=user_id)
