"""Multi-platform verification.

This module fans a single place out to every configured deal platform and
merges the per-platform verdicts into one `VerificationResult`. It is the
only entry point the outer layers (CLI, an HTTP route) need: it builds the
shared HTTP client, resolves the platform set and the search provider from
settings, and guarantees that every platform key is present in the result
no matter how individual checks end.
"""

from __future__ import annotations

import asyncio
from typing import Iterable

import httpx

from adapters.http_client import build_async_client
from adapters.platform_lists import resolve_platforms
from adapters.search_providers import get_provider
from core.config import AppSettings
from core.domain.models import Place, Platform, PlatformVerdict, VerificationResult
from core.interfaces.search_provider import SearchProvider
from core.log import get_logger
from core.services.platform_verifier import PlatformVerifier

logger = get_logger(__name__)

TIMEOUT_ERROR = "timeout"


def unknown_result(place: Place, platforms: Iterable[Platform]) -> VerificationResult:
    """All-`unknown` result, used when there is nothing worth searching for."""

    return VerificationResult(
        place=place,
        platforms={platform.key: PlatformVerdict.unknown() for platform in platforms},
    )


def _collect(key: str, task: asyncio.Task[PlatformVerdict]) -> PlatformVerdict:
    if task.cancelled():
        return PlatformVerdict.unknown(error=TIMEOUT_ERROR)

    exc = task.exception()
    if exc is not None:
        logger.error("platform_task_failed", platform=key, error=repr(exc), exc_info=exc)
        return PlatformVerdict.unknown(error=str(exc) or type(exc).__name__)

    return task.result()


async def verify_all(
    place: Place,
    *,
    settings: AppSettings | None = None,
    platforms: Iterable[Platform] | None = None,
    provider: SearchProvider | None = None,
    client: httpx.AsyncClient | None = None,
    deadline_seconds: float | None = None,
) -> VerificationResult:
    """Verify `place` on every platform concurrently.

    - Empty name: every platform is `unknown` and no request is made.
    - Each platform runs as its own task; one failing never cancels the others.
    - With a deadline (argument, else `settings.verify_deadline_seconds`),
      platforms still pending when it expires are cancelled and reported as
      `unknown` with `error="timeout"`.
    - `client` is borrowed when given; otherwise one is created and closed here.
    """

    settings = settings or AppSettings()
    platform_set = tuple(platforms) if platforms is not None else resolve_platforms(settings.platforms_path)

    if not place.name:
        logger.debug("verification_skipped_empty_name", city=place.city)
        return unknown_result(place, platform_set)
    if not platform_set:
        return VerificationResult(place=place, platforms={})

    provider = provider or get_provider(settings.search_provider)
    deadline = deadline_seconds if deadline_seconds is not None else settings.verify_deadline_seconds

    owns_client = client is None
    http = client if client is not None else build_async_client(settings)
    verifier = PlatformVerifier(settings=settings, provider=provider, client=http)

    tasks: dict[str, asyncio.Task[PlatformVerdict]] = {}
    try:
        for platform in platform_set:
            tasks[platform.key] = asyncio.create_task(
                verifier.verify(place, platform),
                name=f"verify:{platform.key}",
            )

        _done, pending = await asyncio.wait(tasks.values(), timeout=deadline)
        if pending:
            logger.warning(
                "verification_timeout",
                deadline_s=deadline,
                pending=sorted(key for key, task in tasks.items() if task in pending),
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        verdicts = {key: _collect(key, task) for key, task in tasks.items()}
    finally:
        for task in tasks.values():
            if not task.done():
                task.cancel()
        if owns_client:
            await http.aclose()

    return VerificationResult(place=place, platforms=verdicts)


async def check_place(
    name: str,
    city: str = "",
    *,
    settings: AppSettings | None = None,
    **kwargs,
) -> VerificationResult:
    """Convenience wrapper taking raw query values (e.g. HTTP query params)."""

    return await verify_all(Place(name=name, city=city), settings=settings, **kwargs)
