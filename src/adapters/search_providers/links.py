"""Normalización de enlaces de resultados.

Los buscadores envuelven el destino real en una URL de tracking/redirect
(`https://duckduckgo.com/l/?uddg=<destino codificado>`). Aquí se desenvuelve.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urljoin, urlsplit


def _host_in_domain(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def unwrap_redirect(
    href: str,
    *,
    base_url: str,
    provider_domain: str,
    param: str = "uddg",
) -> str:
    """Devuelve la URL de destino real de `href`.

    - Se resuelve contra `base_url` (hrefs relativos o `//host/...`).
    - Si el host es del proveedor y trae `param`, se devuelve su valor decodificado.
    - En cualquier otro caso, o si el parseo falla, `href` sin tocar.
    """

    try:
        parts = urlsplit(urljoin(base_url, href))
        host = parts.hostname
    except ValueError:
        return href

    if not host or not _host_in_domain(host, provider_domain):
        return href

    # parse_qs decodifica como formulario: "+" es espacio, "%2B" es "+".
    values = parse_qs(parts.query).get(param)
    if values and values[0]:
        return values[0]
    return href
