"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Platform, VerdictStatus, VerificationResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("DEALCHECK", style="bold cyan")
    subtitle = Text("Presencia en plataformas de ofertas • Búsqueda • Scoring", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_verdicts_table(result: VerificationResult) -> Table:
    """Tabla Rich con un veredicto por plataforma."""

    place = result.place
    label = place.name if not place.city else f"{place.name} ({place.city})"
    table = Table(title=f"Deal platforms: {label or '-'}")
    table.add_column("Platform", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Confidence", justify="right")
    table.add_column("Best match", style="white")
    table.add_column("URL", style="magenta")
    table.add_column("Error", style="red")

    for key, verdict in result.platforms.items():
        status_style = "green" if verdict.status is VerdictStatus.SURE else "yellow"
        sample = verdict.sample
        table.add_row(
            key,
            Text(verdict.status.value, style=status_style),
            f"{verdict.confidence:.2f}",
            sample.title if sample else "",
            sample.url if sample else "",
            verdict.error or "",
        )
    return table


def build_platforms_table(platforms: Iterable[Platform]) -> Table:
    table = Table(title="Configured platforms")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Domain", style="magenta")
    for platform in platforms:
        table.add_row(platform.key, platform.domain)
    return table
