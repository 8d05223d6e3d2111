"""Carga de listas JSON de plataformas.

Formato:
    {"platforms": [{"key": "toogoodtogo", "domain": "toogoodtogo.com"}, ...]}
"""

from __future__ import annotations

import json
from pathlib import Path

from adapters.platform_lists.models import PlatformsFile
from core.domain.models import Platform
from core.domain.platforms import DEFAULT_PLATFORMS


def load_platforms_file(path: Path) -> PlatformsFile:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return PlatformsFile.model_validate(data)


def resolve_platforms(path: Path | None) -> tuple[Platform, ...]:
    """Plataformas efectivas: el JSON si hay ruta, si no el set por defecto."""

    if path is None:
        return DEFAULT_PLATFORMS
    return tuple(load_platforms_file(path).platforms)
