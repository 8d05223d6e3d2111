"""Proveedores de búsqueda (implementaciones de `SearchProvider`).

Por qué un paquete:
- Agrupa módulos por buscador/plantilla.
- Cada módulo implementa `core.interfaces.search_provider.SearchProvider`.
"""

from __future__ import annotations

from adapters.search_providers.duckduckgo import DuckDuckGoHtmlProvider, DuckDuckGoLiteProvider
from adapters.search_providers.links import unwrap_redirect
from core.interfaces.search_provider import SearchProvider

_PROVIDERS: dict[str, type] = {
    DuckDuckGoHtmlProvider.name: DuckDuckGoHtmlProvider,
    DuckDuckGoLiteProvider.name: DuckDuckGoLiteProvider,
}


def available_providers() -> list[str]:
    return sorted(_PROVIDERS)


def get_provider(name: str) -> SearchProvider:
    """Instancia el proveedor registrado bajo `name`."""

    key = (name or "").strip().lower()
    try:
        provider_cls = _PROVIDERS[key]
    except KeyError:
        raise ValueError(
            f"Unknown search provider {name!r}; expected one of: {', '.join(available_providers())}"
        ) from None
    return provider_cls()


__all__ = [
    "DuckDuckGoHtmlProvider",
    "DuckDuckGoLiteProvider",
    "available_providers",
    "get_provider",
    "unwrap_redirect",
]
