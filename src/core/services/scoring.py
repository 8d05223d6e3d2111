"""Candidate scoring.

Pure functions only: no I/O, no settings lookups. The verifier passes the
weights and the threshold in, which keeps these helpers trivially testable.
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import urlsplit

from core.domain.models import (
    PlatformVerdict,
    ScoredCandidate,
    SearchCandidate,
    VerdictStatus,
)


def tokenize(text: str | None) -> set[str]:
    """Lower-cased whitespace tokens, empties dropped."""

    return {token for token in (text or "").lower().split() if token}


def similarity(a: str | None, b: str | None) -> float:
    """Jaccard index of the token sets of `a` and `b`.

    Bag-of-words proxy for lexical overlap: ignores order, synonyms and
    token frequency. Returns 0.0 when either side has no tokens.
    """

    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    if not tokens_a or not tokens_b:
        return 0.0
    inter = len(tokens_a & tokens_b)
    return inter / len(tokens_a | tokens_b)


def _parse_host(url: str) -> str | None:
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    return host or None


def domain_matches(url: str, domain: str) -> bool:
    """Does `url` point into `domain`?

    Two branches:
    - the URL parses and has a host: the host must contain `domain`;
    - otherwise (relative link, garbage): plain substring check on the raw URL.
    """

    host = _parse_host(url)
    if host is None:
        return domain in url
    return domain in host


def score_candidate(
    candidate: SearchCandidate,
    *,
    target: str,
    domain: str,
    domain_weight: float = 0.5,
    similarity_weight: float = 0.5,
) -> ScoredCandidate:
    sim = similarity(target, candidate.title)
    matched = domain_matches(candidate.url, domain)
    score = (domain_weight if matched else 0.0) + sim * similarity_weight
    return ScoredCandidate(
        title=candidate.title,
        url=candidate.url,
        similarity=sim,
        domain_match=matched,
        score=min(1.0, max(0.0, score)),
    )


def select_best(scored: Iterable[ScoredCandidate]) -> ScoredCandidate | None:
    """Highest score wins; on ties the first seen (search rank order) is kept."""

    best: ScoredCandidate | None = None
    for candidate in scored:
        if best is None or candidate.score > best.score:
            best = candidate
    return best


def classify(best: ScoredCandidate | None, *, similarity_threshold: float = 0.3) -> PlatformVerdict:
    # Domain membership alone is not enough: an unrelated indexed page can
    # live on the platform's domain.
    if best is None:
        return PlatformVerdict(status=VerdictStatus.UNKNOWN, confidence=0.0, sample=None)

    sure = best.domain_match and best.similarity >= similarity_threshold
    return PlatformVerdict(
        status=VerdictStatus.SURE if sure else VerdictStatus.UNKNOWN,
        confidence=best.score,
        sample=best,
    )
