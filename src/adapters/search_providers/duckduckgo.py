"""Proveedor de búsqueda: DuckDuckGo (HTML sin JavaScript).

Implementación:
- Dos variantes del mismo buscador: `/html/` y `lite`. Solo cambian endpoint
  y selectores; la extracción y el desenvuelto de enlaces son comunes.

Notas:
- Los selectores dependen de la plantilla actual de DuckDuckGo. Si cambia,
  solo hay que tocar `selectors` aquí.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from bs4 import BeautifulSoup

from adapters.search_providers.links import unwrap_redirect
from core.domain.models import SearchCandidate


class _DuckDuckGoBase:
    name = "duckduckgo"
    endpoint = "https://duckduckgo.com/html/"
    selectors = "a.result__a, a.result__title"
    provider_domain = "duckduckgo.com"
    redirect_param = "uddg"

    def build_search_url(self, query: str) -> str:
        return f"{self.endpoint}?q={quote_plus(query)}"

    def normalize(self, href: str) -> str:
        return unwrap_redirect(
            href,
            base_url=f"https://{self.provider_domain}",
            provider_domain=self.provider_domain,
            param=self.redirect_param,
        )

    def extract(self, markup: str) -> list[SearchCandidate]:
        if not markup:
            return []

        soup = BeautifulSoup(markup, "html.parser")
        out: list[SearchCandidate] = []
        # `select` devuelve en orden de documento aunque haya varios selectores.
        for anchor in soup.select(self.selectors):
            title = anchor.get_text().strip()
            href = anchor.get("href")
            if not isinstance(href, str):
                continue
            href = href.strip()
            if not title or not href:
                continue
            url = self.normalize(href).strip()
            if not url:
                continue
            out.append(SearchCandidate(title=title, url=url))
        return out


class DuckDuckGoHtmlProvider(_DuckDuckGoBase):
    """`https://duckduckgo.com/html/`: resultados en `a.result__a`."""

    name = "duckduckgo_html"


class DuckDuckGoLiteProvider(_DuckDuckGoBase):
    """`https://lite.duckduckgo.com/lite/`: tabla plana con `a.result-link`."""

    name = "duckduckgo_lite"
    endpoint = "https://lite.duckduckgo.com/lite/"
    selectors = "a.result-link"
