"""CLI entry point (Typer).

Commands:
- `check`: verify a place on every configured deal platform.
- `platforms`: list the configured platform set.
- `doctor`: environment diagnostics (see `cli.doctor`).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_result_json, render_result_json
from adapters.search_providers import get_provider
from cli import doctor
from cli.config_loader import err_console, load_platforms, load_settings
from cli.ui_components import build_platforms_table, build_verdicts_table, print_banner
from core.domain.models import Place
from core.log import setup_logging
from core.services.deal_check_pipeline import verify_all

app = typer.Typer(
    no_args_is_help=True,
    help="Check whether a place is listed on third-party deal platforms.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command()
def check(
    name: str = typer.Argument("", help="Place name (empty -> every platform 'unknown')."),
    city: str = typer.Option("", "--city", "-c", help="City of the place."),
    json_output: bool = typer.Option(False, "--json", help="Print the JSON payload instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON payload here."),
    deadline: Optional[float] = typer.Option(None, "--deadline", min=0.1, help="Overall deadline (seconds)."),
    provider: Optional[str] = typer.Option(None, "--provider", help="Search provider (duckduckgo_html, duckduckgo_lite)."),
    platforms_path: Optional[Path] = typer.Option(None, "--platforms-path", help="JSON file with the platform set."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Verify a place on every configured deal platform."""

    settings = load_settings(
        search_provider=provider,
        platforms_path=platforms_path,
        verify_deadline_seconds=deadline,
        log_level="DEBUG" if verbose else None,
    )
    setup_logging(settings.log_level, json_output=settings.log_json)
    platform_set = load_platforms(settings)
    try:
        search_provider = get_provider(settings.search_provider)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    place = Place(name=name, city=city)
    result = asyncio.run(
        verify_all(place, settings=settings, platforms=platform_set, provider=search_provider)
    )

    if output is not None:
        path = export_result_json(result=result, output_path=output)
        err_console.print(f"[green]Saved JSON to:[/green] {path}")

    if json_output:
        typer.echo(render_result_json(result))
        return

    print_banner(_console)
    _console.print(build_verdicts_table(result))


@app.command()
def platforms(
    platforms_path: Optional[Path] = typer.Option(None, "--platforms-path", help="JSON file with the platform set."),
) -> None:
    """List the configured platform set."""

    settings = load_settings(platforms_path=platforms_path)
    _console.print(build_platforms_table(load_platforms(settings)))


def run() -> None:
    app()
