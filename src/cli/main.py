"""Trip Planner command line interface."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.json_exporter import export_report_json
from adapters.local_vault import LocalVault
from cli import doctor
from cli.ui_components import build_outcomes_table, print_banner, print_outcome
from core.config import (
    ENV_PREFIX,
    AppSettings,
    get_user_env_file,
    load_settings,
    write_user_env_vars,
)
from core.domain.errors import InvalidInput
from core.domain.models import TripRequest
from core.services.scaffolding import ScaffoldHooks, plan_trip

app = typer.Typer(no_args_is_help=True, help="Create a trip folder with starter notes.")
config_app = typer.Typer(no_args_is_help=True, help="Show or persist Trip Planner settings.")
app.add_typer(config_app, name="config")
app.add_typer(doctor.app, name="doctor")

_console = Console()

# CLI key -> settings field.
_CONFIG_KEYS: dict[str, str] = {
    "root-folder": "root_folder",
    "templates-folder": "templates_folder",
    "vault-path": "vault_path",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)


def _load_settings(*, root_folder: str | None, vault: Path | None) -> AppSettings:
    overrides: dict[str, object] = {}
    if root_folder is not None:
        overrides["root_folder"] = root_folder
    if vault is not None:
        overrides["vault_path"] = vault
    return load_settings(**overrides)


def _ask(value: str | None, label: str) -> str:
    # Raw text: the folder name uses the values exactly as typed.
    if value is not None:
        return value
    return str(typer.prompt(label, default="", show_default=False))


def _parse_duration(raw: str) -> int | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        days = int(raw)
    except ValueError:
        days = 0
    if days <= 0:
        _console.print("[red]Duration must be a positive number of days.[/red]")
        raise typer.Exit(code=1)
    return days


@app.command()
def plan(
    destination: str | None = typer.Option(None, "--destination", "-d", help="Trip destination."),
    month: str | None = typer.Option(None, "--month", "-m", help="Month of the trip."),
    duration: str | None = typer.Option(None, "--duration", help="Number of days (optional)."),
    root_folder: str | None = typer.Option(None, "--root-folder", help="Override the configured root folder."),
    vault: Path | None = typer.Option(None, "--vault", help="Vault directory (defaults to settings)."),
    json_out: Path | None = typer.Option(None, "--json", help="Also write the outcome report as JSON."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip the banner and summary table."),
) -> None:
    """Plan a trip: create its folder, itinerary and packing list."""

    if not quiet:
        print_banner(_console)

    dest = _ask(destination, "Destination")
    mon = _ask(month, "Month of Trip")
    # Duration is optional: only ask for it when the dialog is interactive.
    interactive = destination is None or month is None
    dur = _ask(duration, "Duration (days, optional)") if interactive else (duration or "")

    if not dest.strip() or not mon.strip():
        _console.print("[yellow]Please fill out all fields.[/yellow]")
        raise typer.Exit(code=1)

    request = TripRequest(destination=dest, month=mon, duration_days=_parse_duration(dur))
    settings = _load_settings(root_folder=root_folder, vault=vault)
    local_vault = LocalVault(settings.vault_path)

    _console.print(f"Planning trip to [bold]{request.destination}[/bold] in [bold]{request.month}[/bold].")

    hooks = ScaffoldHooks(
        outcome=lambda outcome: print_outcome(_console, outcome),
        warning=lambda message: _console.print(f"[yellow]Warning:[/yellow] {message}"),
    )
    try:
        report = asyncio.run(plan_trip(settings=settings, request=request, vault=local_vault, hooks=hooks))
    except InvalidInput as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if not quiet:
        _console.print(build_outcomes_table(report))

    if json_out is not None:
        path = export_report_json(report=report, output_path=json_out)
        _console.print(f"[green]Report saved to:[/green] {path}")

    if not report.ok:
        raise typer.Exit(code=2)


@config_app.command("show")
def config_show() -> None:
    """Show the effective settings and where they are persisted."""

    settings = load_settings()
    table = Table(title="Trip Planner settings")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, field_name in _CONFIG_KEYS.items():
        table.add_row(key, str(getattr(settings, field_name)))
    _console.print(table)
    _console.print(f"[dim]User config: {get_user_env_file()}[/dim]")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"One of: {', '.join(_CONFIG_KEYS)}."),
    value: str = typer.Argument(..., help="New value."),
) -> None:
    """Persist a setting in the user config .env."""

    field_name = _CONFIG_KEYS.get(key.strip().lower())
    if field_name is None:
        raise typer.BadParameter(f"unknown key '{key}' (expected one of: {', '.join(_CONFIG_KEYS)})")
    if not value.strip():
        raise typer.BadParameter("value must not be empty")

    env_path = write_user_env_vars({f"{ENV_PREFIX}{field_name.upper()}": value.strip()})
    _console.print(f"[green]Saved {key} to:[/green] {env_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
