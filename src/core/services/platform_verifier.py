"""Per-platform presence check.

One verification = one search query restricted to the platform's domain,
scraped and scored against the place. Every failure mode ends up as a
`PlatformVerdict` with `status="unknown"`; nothing here raises for network
or markup problems.
"""

from __future__ import annotations

import httpx

from adapters.http_client import FetchError, fetch_text
from core.config import AppSettings
from core.domain.models import Place, Platform, PlatformVerdict
from core.interfaces.search_provider import SearchProvider
from core.log import get_logger
from core.services.scoring import classify, score_candidate, select_best

logger = get_logger(__name__)


def build_query(place: Place, domain: str) -> str:
    """`"<name> <city> site:<domain>"`."""

    return f"{place.name} {place.city} site:{domain}"


class PlatformVerifier:
    """Checks whether a place is listed on a single deal platform."""

    def __init__(
        self,
        *,
        settings: AppSettings,
        provider: SearchProvider,
        client: httpx.AsyncClient,
    ) -> None:
        self._settings = settings
        self._provider = provider
        self._client = client

    async def verify(self, place: Place, platform: Platform) -> PlatformVerdict:
        query = build_query(place, platform.domain)
        url = self._provider.build_search_url(query)

        try:
            markup = await fetch_text(
                self._client,
                url,
                max_attempts=self._settings.fetch_max_attempts,
                backoff_seconds=self._settings.fetch_backoff_seconds,
            )
        except FetchError as exc:
            logger.warning("platform_fetch_failed", platform=platform.key, error=str(exc))
            return PlatformVerdict.unknown(error=str(exc))

        try:
            candidates = self._provider.extract(markup)[: self._settings.max_candidates]
        except Exception as exc:  # extractor bugs must not break the fan-out
            logger.exception("platform_extract_failed", platform=platform.key, provider=self._provider.name)
            return PlatformVerdict.unknown(error=f"extract failed: {exc}")

        target = place.label()
        scored = [
            score_candidate(
                candidate,
                target=target,
                domain=platform.domain,
                domain_weight=self._settings.domain_weight,
                similarity_weight=self._settings.similarity_weight,
            )
            for candidate in candidates
        ]
        verdict = classify(
            select_best(scored),
            similarity_threshold=self._settings.similarity_threshold,
        )

        logger.info(
            "platform_verified",
            platform=platform.key,
            candidates=len(candidates),
            status=verdict.status.value,
            confidence=round(verdict.confidence, 3),
        )
        return verdict
