"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers de navegador y la política de reintentos.
- Facilita testeo: se puede inyectar un cliente con `httpx.MockTransport`.
"""

from __future__ import annotations

import asyncio

import httpx

from core.config import AppSettings
from core.log import get_logger

logger = get_logger(__name__)


class FetchError(Exception):
    """La descarga falló tras agotar los intentos (red o status no-2xx)."""

    def __init__(self, url: str, attempts: int, last_error: BaseException | str) -> None:
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        detail = str(last_error) or type(last_error).__name__
        super().__init__(f"{detail} (after {attempts} attempt{'s' if attempts != 1 else ''})")


def browser_headers(settings: AppSettings) -> dict[str, str]:
    """Cabeceras tipo navegador de escritorio.

    Algunos buscadores devuelven páginas degradadas (o bloquean) si faltan.
    """

    return {
        "User-Agent": settings.user_agent,
        "Accept": settings.accept,
        "Accept-Language": settings.accept_language,
    }


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las búsquedas se comporten igual.
    - `transport` permite tests sin red.
    """

    settings = settings or AppSettings()
    headers = browser_headers(settings)
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_text(
    client: httpx.AsyncClient,
    url: str,
    *,
    max_attempts: int = 2,
    backoff_seconds: float = 0.4,
) -> str:
    """GET `url` y devuelve el cuerpo como texto.

    Política:
    - Un status no-2xx o un `httpx.HTTPError` cuentan como intento fallido.
    - Entre intentos se espera `backoff_seconds` fijo (sin exponencial ni jitter).
    - Agotados los intentos se lanza `FetchError` con el último error.
    """

    attempts = max(1, int(max_attempts))
    last_error: BaseException | str = "no attempt made"

    for attempt in range(1, attempts + 1):
        try:
            response = await client.get(url)
            if 200 <= response.status_code < 300:
                return response.text
            last_error = f"HTTP {response.status_code}"
        except httpx.HTTPError as exc:
            last_error = exc

        if attempt < attempts:
            logger.debug(
                "fetch_retry",
                url=url,
                attempt=attempt,
                error=str(last_error),
                delay_s=backoff_seconds,
            )
            await asyncio.sleep(backoff_seconds)

    raise FetchError(url, attempts, last_error)
