"""Project page rendering.

Why in adapters:
- HTML is an infrastructure detail (Jinja2).
- The Core only knows the `ProjectPage` state written by the controller.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.language import Language
from core.domain.models import ProjectPage


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_project_html(*, page: ProjectPage) -> str:
    """Render a self-contained HTML page from the final page state."""

    language = Language.parse(page.language)
    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")

    template = _get_env().get_template("project.html")
    return template.render(
        page=page,
        generated_at=generated_at,
        t=language.message,
    )


def export_project_html(*, page: ProjectPage, output_path: Path) -> Path:
    """Write the rendered page to `output_path` (parents created as needed)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_project_html(page=page)
    output_path.write_text(html, encoding="utf-8")
    return output_path
