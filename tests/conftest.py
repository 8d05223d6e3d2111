"""
Pytest configuration and shared fixtures.

No test touches the network: HTTP goes through `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import quote

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings


def ddg_result(title: str, target_url: str, *, wrapped: bool = True) -> str:
    """One result block as rendered by duckduckgo.com/html/."""

    href = f"//duckduckgo.com/l/?uddg={quote(target_url, safe='')}&amp;rut=abc123" if wrapped else target_url
    return f"""
    <div class="result results_links results_links_deep web-result">
      <div class="links_main links_deep result__body">
        <h2 class="result__title">
          <a rel="nofollow" class="result__a" href="{href}">{title}</a>
        </h2>
        <a class="result__snippet" href="{href}">Snippet for {title}</a>
      </div>
    </div>
    """


def ddg_page(*results: str) -> str:
    body = "\n".join(results) or '<div class="no-results">No results.</div>'
    return f"""
    <!DOCTYPE html>
    <html>
    <head><title>DuckDuckGo</title></head>
    <body>
      <div id="links" class="results">
        {body}
      </div>
    </body>
    </html>
    """


@pytest.fixture
def settings() -> AppSettings:
    """Defaults, minus the backoff so retry tests stay fast."""
    return AppSettings(_env_file=None, fetch_backoff_seconds=0.0)


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[[Callable], httpx.AsyncClient]:
    def _make(handler: Callable) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    return _make
