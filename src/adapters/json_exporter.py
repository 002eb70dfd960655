"""JSON export of the page state.

Why JSON:
- Lets other archive tooling consume the extracted metadata.
- Keeps the data reviewable without going through the HTML render.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ProjectPage


def export_project_json(*, page: ProjectPage, output_path: Path) -> Path:
    """Export `ProjectPage` as UTF-8 JSON, keeping the panels in display order."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = page.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
