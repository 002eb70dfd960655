"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.page_renderer import render_project_html
from core.config import AppSettings
from core.domain.models import ProjectPage

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_template() -> tuple[bool, str]:
    """Render an empty page to detect a missing or broken template."""

    try:
        html = render_project_html(page=ProjectPage(document_title="doctor"))
        if 'id="projectContent"' not in html:
            return False, "rendered page lacks #projectContent"
        return True, "OK"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="Eco Archive Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    entity_probe = f"{settings.entity_data_url}Q42.json"
    ok_entity, detail_entity = asyncio.run(_check_http(entity_probe, settings))
    table.add_row("Entity endpoint", "OK" if ok_entity else "FAIL", detail_entity)

    search_probe = f"{settings.search_api_url}?action=wbsearchentities&search=Penone&language=it&format=json"
    ok_search, detail_search = asyncio.run(_check_http(search_probe, settings))
    table.add_row("Search endpoint", "OK" if ok_search else "FAIL", detail_search)

    # Template
    ok_tpl, detail_tpl = _check_template()
    table.add_row("HTML template", "OK" if ok_tpl else "FAIL", detail_tpl)

    _console.print(table)

    if not (ok_entity and ok_search):
        _console.print(
            "\n[yellow]Note:[/yellow] Without connectivity every page falls back to 'no data' notices."
        )
