"""
Unit tests for redirect-link unwrapping.

Run: pytest tests/test_links.py -v
"""
from __future__ import annotations

import pytest

from adapters.search_providers.links import unwrap_redirect


def _unwrap(href: str) -> str:
    return unwrap_redirect(href, base_url="https://duckduckgo.com", provider_domain="duckduckgo.com")


def test_unwraps_protocol_relative_redirect() -> None:
    href = "//duckduckgo.com/l/?uddg=https%3A%2F%2Ftoogoodtogo.com%2Fen-ca%2Fitem%2F123&rut=abc"
    assert _unwrap(href) == "https://toogoodtogo.com/en-ca/item/123"


def test_unwraps_absolute_redirect_on_subdomain() -> None:
    href = "https://html.duckduckgo.com/l/?uddg=https%3A%2F%2Fflashfood.com%2Fstore%3Fid%3D7"
    assert _unwrap(href) == "https://flashfood.com/store?id=7"


def test_unwraps_relative_redirect() -> None:
    href = "/l/?kh=-1&uddg=https%3A%2F%2Ffoodhero.com%2Fshop"
    assert _unwrap(href) == "https://foodhero.com/shop"


def test_provider_link_without_param_is_unchanged() -> None:
    assert _unwrap("/settings") == "/settings"
    assert _unwrap("https://duckduckgo.com/l/?uddg=") == "https://duckduckgo.com/l/?uddg="


def test_foreign_host_with_param_is_unchanged() -> None:
    href = "https://evil.example/l/?uddg=https%3A%2F%2Ftoogoodtogo.com"
    assert _unwrap(href) == href


def test_lookalike_domain_is_not_the_provider() -> None:
    href = "https://notduckduckgo.com/l/?uddg=https%3A%2F%2Ftoogoodtogo.com"
    assert _unwrap(href) == href


def test_redirect_value_is_form_decoded() -> None:
    # Query strings are form-encoded: a bare "+" is a space, "%2B" is a literal plus.
    assert _unwrap("//duckduckgo.com/l/?uddg=https%3A%2F%2Ftoogoodtogo.com%2Fa+b") == "https://toogoodtogo.com/a b"
    assert _unwrap("//duckduckgo.com/l/?uddg=https%3A%2F%2Ftoogoodtogo.com%2Fa%2Bb") == "https://toogoodtogo.com/a+b"


def test_malformed_href_is_returned_unchanged() -> None:
    href = "http://[broken"
    assert _unwrap(href) == href


@pytest.mark.parametrize(
    "url",
    [
        "https://toogoodtogo.com/item/123",
        "https://www.flashfood.com/?q=fresh%20mart",
        "mailto:someone@example.com",
        "",
        "http://[broken",
    ],
)
def test_idempotent_on_non_redirect_urls(url: str) -> None:
    assert _unwrap(_unwrap(url)) == _unwrap(url) == url
