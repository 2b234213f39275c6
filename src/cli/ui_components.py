"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Cada estado de `CreationOutcome` tiene un mensaje y un color propios, así el
  usuario distingue de un vistazo qué se creó, qué ya existía y qué falló.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CreationOutcome, OutcomeStatus, ScaffoldReport
from core.services.scaffolding import FOLDER_LABEL

_STATUS_STYLE: dict[OutcomeStatus, str] = {
    OutcomeStatus.CREATED: "green",
    OutcomeStatus.ALREADY_EXISTS: "yellow",
    OutcomeStatus.FAILED: "bold red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Trip Planner", style="bold cyan")
    subtitle = Text("Carpeta del viaje • Itinerario • Lista de equipaje", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def outcome_message(outcome: CreationOutcome) -> str:
    """Mensaje legible para una notificación (uno por resultado)."""

    kind = "Folder" if outcome.label == FOLDER_LABEL else "Note"
    if outcome.status is OutcomeStatus.CREATED:
        suffix = ""
        if outcome.content_source is not None:
            suffix = f" (from {outcome.content_source.value})"
        return f'{kind} "{outcome.path}" created successfully!{suffix}'
    if outcome.status is OutcomeStatus.ALREADY_EXISTS:
        return f'{kind} "{outcome.path}" already exists.'
    return f'Failed to create {kind.lower()} "{outcome.path}": {outcome.reason or "unknown error"}'


def print_outcome(console: Console, outcome: CreationOutcome) -> None:
    console.print(Text(outcome_message(outcome), style=_STATUS_STYLE[outcome.status]))


def build_outcomes_table(report: ScaffoldReport) -> Table:
    """Tabla resumen con todos los pasos, en orden."""

    table = Table(title=f"Trip: {report.location.folder_path}")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Status", no_wrap=True)
    table.add_column("Details", style="dim")
    for outcome in report.outcomes:
        details = outcome.reason or (outcome.content_source.value if outcome.content_source else "")
        table.add_row(
            outcome.label,
            outcome.path,
            Text(outcome.status.value, style=_STATUS_STYLE[outcome.status]),
            details,
        )
    return table
