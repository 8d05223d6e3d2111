"""Contrato de proveedores de búsqueda.

Por qué Protocol:
- El extractor depende del markup actual del buscador y es la pieza más
  frágil: aislarlo detrás de un contrato estructural hace que un cambio de
  plantilla (o de proveedor) solo toque una implementación.
- El scoring y la orquestación no conocen selectores ni URLs del buscador.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import SearchCandidate


@runtime_checkable
class SearchProvider(Protocol):
    """Contrato mínimo para un buscador HTML.

    Reglas de diseño:
    - `extract` es síncrono y puro: recibe markup ya descargado.
    - Devuelve candidatos en orden de documento, sin títulos ni URLs vacíos.
    """

    name: str

    def build_search_url(self, query: str) -> str:
        """URL de resultados HTML para `query` (ya codificada)."""

        ...

    def extract(self, markup: str) -> list[SearchCandidate]:
        """Extrae `(title, url)` del markup de una página de resultados."""

        ...
