"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Permite serializar el resultado tal cual lo consume la capa HTTP/CLI.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class VerdictStatus(str, Enum):
    """Nivel de confianza grueso de una verificación."""

    SURE = "sure"
    UNKNOWN = "unknown"


class Place(BaseModel):
    """Lugar buscado (comercio, restaurante...). Entrada inmutable."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        default="",
        description="Nombre del lugar tal como lo conoce el usuario.",
    )
    city: str = Field(
        default="",
        description="Ciudad del lugar (afina la búsqueda).",
    )

    @field_validator("name", "city", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    def label(self) -> str:
        """`"<name> <city>"`: texto contra el que se compara cada título."""

        return f"{self.name} {self.city}"


class Platform(BaseModel):
    """Plataforma de ofertas a sondear: clave estable + dominio."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_\-]+$",
        description="Clave en el mapping de resultados (p.ej. 'toogoodtogo').",
    )
    domain: str = Field(
        ...,
        min_length=3,
        max_length=253,
        description="Dominio usado en `site:` y en el match de host (p.ej. 'toogoodtogo.com').",
    )

    @field_validator("domain")
    @classmethod
    def _normalize_domain(cls, value: str) -> str:
        return value.strip().lower()


class SearchCandidate(BaseModel):
    """Un resultado extraído del buscador (URL ya desenvuelta)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class ScoredCandidate(SearchCandidate):
    """Candidato con su puntuación frente al lugar buscado."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    similarity: float = Field(..., ge=0.0, le=1.0)
    domain_match: bool = Field(..., alias="domainMatch")
    score: float = Field(..., ge=0.0, le=1.0)


class PlatformVerdict(BaseModel):
    """Resultado terminal para una plataforma. Nunca se muta tras crearse."""

    model_config = ConfigDict(frozen=True)

    status: VerdictStatus = Field(default=VerdictStatus.UNKNOWN)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    sample: ScoredCandidate | None = Field(
        default=None,
        description="Mejor candidato encontrado (si hubo alguno).",
    )
    error: str | None = Field(
        default=None,
        description="Descripción del fallo (red, timeout...).",
    )

    @classmethod
    def unknown(cls, error: str | None = None) -> "PlatformVerdict":
        return cls(status=VerdictStatus.UNKNOWN, confidence=0.0, error=error)

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True)
        if payload.get("error") is None:
            payload.pop("error", None)
        return payload


class VerificationResult(BaseModel):
    """Agregado de respuesta: el lugar + un veredicto por plataforma."""

    place: Place
    platforms: dict[str, PlatformVerdict] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Forma de respuesta para consumidores (HTTP/CLI JSON)."""

        return {
            "place": self.place.model_dump(mode="json"),
            "platforms": {key: verdict.to_payload() for key, verdict in self.platforms.items()},
        }
