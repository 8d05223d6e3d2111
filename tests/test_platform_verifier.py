"""
Tests for the single-platform verifier against a faked search provider.

Run: pytest tests/test_platform_verifier.py -v
"""
from __future__ import annotations

import httpx
import pytest

from adapters.search_providers import DuckDuckGoHtmlProvider
from conftest import ddg_page, ddg_result
from core.config import AppSettings
from core.domain.models import Place, Platform, SearchCandidate, VerdictStatus
from core.services.platform_verifier import PlatformVerifier, build_query

FRESH_MART = Place(name="Fresh Mart", city="Mississauga")
TGTG = Platform(key="toogoodtogo", domain="toogoodtogo.com")


def _verifier(settings: AppSettings, client: httpx.AsyncClient, provider=None) -> PlatformVerifier:
    return PlatformVerifier(settings=settings, provider=provider or DuckDuckGoHtmlProvider(), client=client)


def _serve(markup: str, seen: list[httpx.Request] | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(200, text=markup)

    return handler


def test_build_query_restricts_to_platform_domain() -> None:
    assert build_query(FRESH_MART, "toogoodtogo.com") == "Fresh Mart Mississauga site:toogoodtogo.com"


@pytest.mark.asyncio
async def test_matching_result_on_platform_domain_is_sure(settings: AppSettings, make_client) -> None:
    seen: list[httpx.Request] = []
    markup = ddg_page(ddg_result("Fresh Mart Mississauga - Too Good To Go", "https://toogoodtogo.com/item/123"))

    async with make_client(_serve(markup, seen)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.SURE
    assert verdict.error is None
    assert verdict.sample is not None
    assert verdict.sample.url == "https://toogoodtogo.com/item/123"
    assert verdict.sample.domain_match is True
    assert verdict.sample.similarity >= 0.3
    assert verdict.confidence == pytest.approx(0.5 + 0.5 * verdict.sample.similarity)
    assert seen[0].url.params["q"] == "Fresh Mart Mississauga site:toogoodtogo.com"


@pytest.mark.asyncio
async def test_identical_title_on_unrelated_domain_stays_unknown(settings: AppSettings, make_client) -> None:
    markup = ddg_page(ddg_result("Fresh Mart Mississauga", "https://www.yelp.ca/biz/fresh-mart-mississauga"))

    async with make_client(_serve(markup)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.sample is not None
    assert verdict.sample.domain_match is False
    assert verdict.sample.similarity == 1.0
    assert verdict.confidence == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_right_domain_wrong_name_stays_unknown(settings: AppSettings, make_client) -> None:
    markup = ddg_page(ddg_result("Surprise Bags near you | Too Good To Go", "https://toogoodtogo.com/en-ca"))

    async with make_client(_serve(markup)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.confidence == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_best_scoring_candidate_is_selected(settings: AppSettings, make_client) -> None:
    markup = ddg_page(
        ddg_result("Fresh Mart Mississauga reviews", "https://www.yelp.ca/biz/fresh-mart"),
        ddg_result("Fresh Mart - Too Good To Go", "https://toogoodtogo.com/item/9"),
    )

    async with make_client(_serve(markup)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.sample is not None
    assert verdict.sample.url == "https://toogoodtogo.com/item/9"


@pytest.mark.asyncio
async def test_only_first_candidates_are_scored(make_client) -> None:
    settings = AppSettings(_env_file=None, fetch_backoff_seconds=0.0, max_candidates=2)
    markup = ddg_page(
        ddg_result("Unrelated one", "https://example.com/1"),
        ddg_result("Unrelated two", "https://example.com/2"),
        ddg_result("Fresh Mart Mississauga", "https://toogoodtogo.com/item/123"),
    )

    async with make_client(_serve(markup)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.confidence == 0.0
    assert verdict.sample is not None
    assert verdict.sample.url == "https://example.com/1"


@pytest.mark.asyncio
async def test_no_results_is_unknown_without_error(settings: AppSettings, make_client) -> None:
    async with make_client(_serve(ddg_page())) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.confidence == 0.0
    assert verdict.sample is None
    assert verdict.error is None


@pytest.mark.asyncio
async def test_two_503_degrade_to_unknown_with_error(settings: AppSettings, make_client) -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503)

    async with make_client(handler) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert calls == 2
    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.confidence == 0.0
    assert verdict.error
    assert "HTTP 503" in verdict.error


@pytest.mark.asyncio
async def test_threshold_is_configurable(make_client) -> None:
    settings = AppSettings(_env_file=None, fetch_backoff_seconds=0.0, similarity_threshold=0.9)
    markup = ddg_page(ddg_result("Fresh Mart Mississauga - Too Good To Go", "https://toogoodtogo.com/item/123"))

    async with make_client(_serve(markup)) as client:
        verdict = await _verifier(settings, client).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN


class _ExplodingProvider:
    name = "exploding"

    def build_search_url(self, query: str) -> str:
        return "https://search.test/?q=x"

    def extract(self, markup: str) -> list[SearchCandidate]:
        raise RuntimeError("template changed")


@pytest.mark.asyncio
async def test_extractor_failure_never_escapes(settings: AppSettings, make_client) -> None:
    async with make_client(_serve("<html></html>")) as client:
        verdict = await _verifier(settings, client, provider=_ExplodingProvider()).verify(FRESH_MART, TGTG)

    assert verdict.status is VerdictStatus.UNKNOWN
    assert verdict.error is not None
    assert "template changed" in verdict.error
