"""Exportación JSON del resultado.

Por qué JSON:
- Es la misma forma de respuesta que consume la capa HTTP.
- Permite guardar la evidencia (mejor candidato por plataforma) para revisarla luego.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import VerificationResult


def render_result_json(result: VerificationResult) -> str:
    return json.dumps(result.to_payload(), ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: VerificationResult, output_path: Path) -> Path:
    """Exporta `VerificationResult` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_result_json(result) + "\n", encoding="utf-8")
    return output_path
