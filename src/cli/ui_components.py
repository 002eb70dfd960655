"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import MetadataPanel, ProjectPage, SearchResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in quiet/pipeline mode)."""

    title = Text("Biennale Eco Archive", style="bold green")
    subtitle = Text("Project detail • Wikidata", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_metadata_table(title: str, panel: MetadataPanel) -> Table:
    """Two-column table for one metadata container."""

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    if panel.notice:
        table.add_row("!", Text(panel.notice, style="yellow"))
    for key, value in panel.entries.items():
        table.add_row(key, value)
    return table


def build_search_table(results: list[SearchResult]) -> Table:
    table = Table(title="Wikidata search")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    table.add_column("Description", style="dim")
    for r in results:
        table.add_row(r.id, r.label or "", r.description or "")
    return table


def build_error_panel(page: ProjectPage) -> Panel:
    assert page.error is not None
    body = Text()
    body.append(page.error.body + "\n\n")
    body.append(f"{page.error.back_text}: {page.error.back_href}", style="dim")
    return Panel(body, title=Text(page.error.title, style="bold red"), border_style="red")


def build_header_text(page: ProjectPage) -> Text:
    text = Text()
    text.append(page.project_title, style="bold")
    text.append(f"\n{page.project_artist}, {page.project_year}", style="dim")
    if not page.view_on_wikidata.disabled:
        text.append(f"\n{page.view_on_wikidata.href}", style="magenta")
    return text
