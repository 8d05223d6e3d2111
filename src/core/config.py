"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/HTML) y servicios lean los mismos umbrales.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "dealcheck"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dealcheck"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dealcheck"
    return Path.home() / ".config" / "dealcheck"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Los pesos y umbrales del scoring son empíricos: se exponen como
      configuración en vez de literales para poder ajustarlos y testearlos.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEALCHECK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=_BROWSER_USER_AGENT,
        min_length=1,
        description="User-Agent de navegador de escritorio (el buscador degrada UAs raros).",
    )
    accept: str = Field(
        default="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        min_length=1,
        description="Cabecera Accept enviada al buscador.",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.9",
        min_length=1,
        description="Cabecera Accept-Language enviada al buscador.",
    )

    search_provider: str = Field(
        default="duckduckgo_html",
        min_length=1,
        description="Proveedor de búsqueda (ver adapters.search_providers).",
    )
    fetch_max_attempts: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Intentos totales por búsqueda (1 intento + reintentos).",
    )
    fetch_backoff_seconds: float = Field(
        default=0.4,
        ge=0,
        description="Espera fija entre intentos fallidos (segundos).",
    )

    max_candidates: int = Field(
        default=6,
        ge=1,
        le=50,
        description="Resultados evaluados por plataforma (los primeros N del buscador).",
    )
    similarity_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Similitud mínima para declarar 'sure'.",
    )
    domain_weight: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Peso del match de dominio en el score.",
    )
    similarity_weight: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Peso de la similitud textual en el score.",
    )

    verify_deadline_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Deadline global del fan-out; las plataformas pendientes reportan 'timeout'.",
    )
    platforms_path: Path | None = Field(
        default=None,
        description="Ruta local a un JSON de plataformas ({'platforms': [{key, domain}]}).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs en JSON (pipelines) en vez de consola.",
    )
