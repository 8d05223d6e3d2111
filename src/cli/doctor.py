"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import FetchError, build_async_client, fetch_text
from adapters.platform_lists import resolve_platforms
from adapters.search_providers import get_provider
from cli.config_loader import load_settings
from core.config import AppSettings, get_user_env_file
from core.log import setup_logging

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_search(settings: AppSettings) -> tuple[bool, str]:
    """Single real query against the provider; reports how many results parse."""

    try:
        provider = get_provider(settings.search_provider)
    except ValueError as exc:
        return False, str(exc)

    url = provider.build_search_url("bakery toronto site:toogoodtogo.com")
    try:
        async with build_async_client(settings) as client:
            markup = await fetch_text(
                client,
                url,
                max_attempts=settings.fetch_max_attempts,
                backoff_seconds=settings.fetch_backoff_seconds,
            )
    except FetchError as exc:
        return False, str(exc)

    found = len(provider.extract(markup))
    if not found:
        return False, "HTTP OK but no results parsed (markup changed or request degraded?)"
    return True, f"{found} results parsed"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    table = Table(title="DEALCHECK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Search provider", "OK", settings.search_provider)
    table.add_row(
        "Retry policy",
        "OK",
        f"{settings.fetch_max_attempts} attempts, {settings.fetch_backoff_seconds:.2f}s backoff",
    )
    table.add_row(
        "Scoring",
        "OK",
        f"domain {settings.domain_weight:.2f} / similarity {settings.similarity_weight:.2f}, "
        f"threshold {settings.similarity_threshold:.2f}, top {settings.max_candidates}",
    )

    try:
        platforms = resolve_platforms(settings.platforms_path)
        table.add_row("Platforms", "OK", ", ".join(f"{p.key}={p.domain}" for p in platforms))
    except (OSError, ValueError) as exc:
        table.add_row("Platforms", "FAIL", str(exc))

    # Connectivity (best-effort)
    ok_search, detail_search = asyncio.run(_check_search(settings))
    table.add_row("Search connectivity", "OK" if ok_search else "FAIL", detail_search)

    _console.print(table)

    if not ok_search:
        _console.print(
            "\n[yellow]Note:[/yellow] try `DEALCHECK_SEARCH_PROVIDER=duckduckgo_lite` if the HTML endpoint is degraded."
        )
