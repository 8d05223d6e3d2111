"""Modelos para listas de plataformas (data-driven).

Idea:
- Las plataformas son datos `{key, domain}`: añadir una no exige tocar el
  verificador, solo un JSON con la lista completa.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from core.domain.models import Platform


class PlatformsFile(BaseModel):
    platforms: list[Platform] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _unique_keys(self) -> "PlatformsFile":
        seen: set[str] = set()
        for platform in self.platforms:
            if platform.key in seen:
                raise ValueError(f"duplicate platform key: {platform.key!r}")
            seen.add(platform.key)
        return self
