"""Eco Archive CLI (Typer).

The CLI only parses parameters, wires settings and logging, and prints;
the page-load flow lives in `core.services.project_detail`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_project_json
from adapters.page_renderer import export_project_html
from adapters.wikidata_client import WikidataClient
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_header_text,
    build_metadata_table,
    build_search_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import ProjectQuery
from core.services.entity_fields import get_description, get_label
from core.services.project_detail import load_project_page

app = typer.Typer(
    no_args_is_help=True,
    help="Biennale Eco Archive: project detail pages from Wikidata.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _resolve_language(value: str | None, settings: AppSettings) -> Language:
    if value is None:
        return settings.default_language
    try:
        return Language(value.strip().lower())
    except ValueError as exc:
        raise typer.BadParameter(f"unsupported language {value!r} (use 'it' or 'en')") from exc


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override ECO_ARCHIVE_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


@app.command()
def show(
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name."),
    work: str | None = typer.Option(None, "--work", "-w", help="Work title."),
    year: str | None = typer.Option(None, "--year", "-y", help="Edition year."),
    url: str | None = typer.Option(
        None,
        "--url",
        help="Page URL or query string carrying artist/work/year (e.g. 'project.html?artist=...').",
    ),
    language: str | None = typer.Option(None, "--language", "-l", help="it | en"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the rendered HTML page here."),
    json_path: Path | None = typer.Option(None, "--json", help="Write the page state as JSON here."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No banner and no tables."),
) -> None:
    """Load one project page: artist and work metadata from Wikidata."""

    settings = AppSettings()
    lang = _resolve_language(language, settings)

    defaults = ProjectQuery(
        artist=settings.default_artist,
        work=settings.default_work,
        year=settings.default_year,
    )
    query = ProjectQuery.from_url(url, defaults=defaults) if url else defaults
    query = ProjectQuery(
        artist=(artist or "").strip() or query.artist,
        work=(work or "").strip() or query.work,
        year=(year or "").strip() or query.year,
    )

    client = WikidataClient(settings)
    page = asyncio.run(load_project_page(client, query, language=lang, settings=settings))

    if not quiet:
        print_banner(_console)
        _console.print(build_header_text(page))
        if page.error is not None:
            _console.print(build_error_panel(page))
        else:
            _console.print(build_metadata_table(lang.message("section_artist"), page.artist_wikidata))
            _console.print(build_metadata_table(lang.message("section_work"), page.work_wikidata))

    if output is not None:
        path = export_project_html(page=page, output_path=output)
        _console.print(f"[green]HTML:[/green] {path}")
    if json_path is not None:
        path = export_project_json(page=page, output_path=json_path)
        _console.print(f"[green]JSON:[/green] {path}")

    if page.error is not None:
        raise typer.Exit(code=1)


@app.command()
def search(
    term: str = typer.Argument(..., help="Free-text search term."),
    language: str | None = typer.Option(None, "--language", "-l", help="it | en"),
) -> None:
    """Keyword search on Wikidata (best match first)."""

    settings = AppSettings()
    lang = _resolve_language(language, settings)
    results = asyncio.run(WikidataClient(settings).search_entities(term, lang))
    if not results:
        _console.print("[yellow]No results.[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_search_table(results))


@app.command()
def entity(
    entity_id: str = typer.Argument(..., help="Entity id, e.g. Q42."),
    language: str | None = typer.Option(None, "--language", "-l", help="it | en"),
) -> None:
    """Fetch one entity and print its label and description."""

    settings = AppSettings()
    lang = _resolve_language(language, settings)
    entity_id = entity_id.strip().upper()
    if not entity_id:
        raise typer.BadParameter("entity id is required")

    client = WikidataClient(settings)
    record = asyncio.run(client.get_entity(entity_id))
    if record is None:
        _console.print(f"[red]Entity {entity_id} could not be fetched.[/red]")
        raise typer.Exit(code=1)

    _console.print(f"[bold]{get_label(record, lang)}[/bold] ({record.id})")
    _console.print(get_description(record, lang), style="dim")
    _console.print(client.entity_url(record.id), style="magenta")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
