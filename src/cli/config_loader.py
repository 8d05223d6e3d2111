"""Carga de configuración compartida por los comandos del CLI.

Los errores de configuración se muestran en rojo por stderr y terminan con
código de salida 2, sin traceback.
"""

from __future__ import annotations

from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.platform_lists import resolve_platforms
from core.config import AppSettings
from core.domain.models import Platform

err_console = Console(stderr=True)


def load_settings(**overrides: Any) -> AppSettings:
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return AppSettings(**values)
    except ValidationError as exc:
        err_console.print(f"[red]Invalid configuration:[/red]\n{exc}")
        raise typer.Exit(code=2) from exc


def load_platforms(settings: AppSettings) -> tuple[Platform, ...]:
    try:
        return resolve_platforms(settings.platforms_path)
    except (OSError, ValueError) as exc:
        # ValueError cubre JSON inválido y ValidationError de pydantic.
        err_console.print(f"[red]Cannot load platforms from {settings.platforms_path}:[/red] {exc}")
        raise typer.Exit(code=2) from exc
