"""Doctor command for vault and template diagnostics."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.local_vault import LocalVault
from core.config import get_user_env_file, load_settings
from core.domain.models import TemplateSource
from core.services.templates import template_catalogue

app = typer.Typer(no_args_is_help=True, help="Vault and template diagnostics.")

_console = Console()


def _check_vault(path: Path) -> tuple[bool, str]:
    if not path.exists():
        return False, f"{path} does not exist"
    if not path.is_dir():
        return False, f"{path} is not a directory"
    if not os.access(path, os.W_OK):
        return False, f"{path} is not writable"
    return True, str(path.resolve())


async def _check_templates(
    vault: LocalVault, templates: dict[str, TemplateSource]
) -> list[tuple[str, bool, str]]:
    rows: list[tuple[str, bool, str]] = []
    for label, template in templates.items():
        try:
            found = await vault.is_document(template.path)
        except Exception as exc:
            rows.append((label, False, str(exc)))
            continue
        rows.append((label, found, template.path))
    return rows


@app.command()
def run(
    vault: Path | None = typer.Option(None, "--vault", help="Vault directory (defaults to settings)."),
) -> None:
    """Run baseline diagnostics and show which templates will be used."""

    settings = load_settings(vault_path=vault) if vault is not None else load_settings()

    table = Table(title="Trip Planner Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_vault, detail_vault = _check_vault(settings.vault_path)
    table.add_row("Vault", "OK" if ok_vault else "FAIL", detail_vault)
    table.add_row("Root folder", "OK", settings.root_folder)
    table.add_row("Templates folder", "OK", settings.templates_folder)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    if ok_vault:
        local_vault = LocalVault(settings.vault_path)
        templates = template_catalogue(settings.templates_folder)
        for label, found, detail in asyncio.run(_check_templates(local_vault, templates)):
            if found:
                table.add_row(f"{label} template", "OK", detail)
            else:
                table.add_row(f"{label} template", "OPTIONAL", f"{detail} missing -> default content")

    _console.print(table)

    if not ok_vault:
        _console.print(
            "\n[yellow]Note:[/yellow] Point `--vault` (or TRIP_PLANNER_VAULT_PATH) at an existing, writable directory."
        )
        raise typer.Exit(code=1)
