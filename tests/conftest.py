"""Shared fixtures: sample Wikidata documents and an in-memory knowledge base."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.config import AppSettings  # noqa: E402
from core.domain.language import Language  # noqa: E402
from core.domain.models import SearchResult, WikidataEntity  # noqa: E402


def _text(language: str, value: str) -> dict[str, str]:
    return {"language": language, "value": value}


def _claim(property_id: str, value: Any, value_type: str) -> list[dict[str, Any]]:
    return [
        {
            "mainsnak": {
                "snaktype": "value",
                "property": property_id,
                "datavalue": {"value": value, "type": value_type},
            },
            "type": "statement",
            "rank": "normal",
        }
    ]


ARTIST_DOC: dict[str, Any] = {
    "id": "Q1367437",
    "type": "item",
    "labels": {"it": _text("it", "Giuseppe Penone"), "en": _text("en", "Giuseppe Penone")},
    "descriptions": {"it": _text("it", "scultore italiano")},
    "claims": {
        "P569": _claim(
            "P569",
            {"time": "+1947-04-03T00:00:00Z", "precision": 11, "calendarmodel": "http://www.wikidata.org/entity/Q1985727"},
            "time",
        ),
        "P19": _claim("P19", {"entity-type": "item", "numeric-id": 1, "id": "Q20006"}, "wikibase-entityid"),
        "P27": _claim("P27", {"entity-type": "item", "numeric-id": 38, "id": "Q38"}, "wikibase-entityid"),
        "P135": _claim("P135", {"entity-type": "item", "id": "Q329030"}, "wikibase-entityid"),
    },
    "sitelinks": {"itwiki": {"site": "itwiki", "title": "Giuseppe Penone"}},
}

WORK_DOC: dict[str, Any] = {
    "id": "Q98765",
    "labels": {"it": _text("it", "Albero della Vita")},
    "descriptions": {},
    "claims": {
        "P571": _claim("P571", {"time": "+1962-00-00T00:00:00Z", "precision": 9}, "time"),
        "P186": _claim("P186", {"id": "Q287"}, "wikibase-entityid"),
        "P2049": _claim("P2049", {"amount": "+120", "unit": "http://www.wikidata.org/entity/Q174728"}, "quantity"),
        "P1476": _claim("P1476", {"text": "Albero della Vita", "language": "it"}, "monolingualtext"),
        "P217": _claim("P217", "INV-1962-07", "string"),
    },
}

LINKED_LABELS: dict[str, str] = {
    "Q20006": "Garessio",
    "Q38": "Italia",
    "Q329030": "Arte povera",
    "Q287": "legno",
}


@pytest.fixture
def artist_entity() -> WikidataEntity:
    return WikidataEntity.model_validate(ARTIST_DOC)


@pytest.fixture
def work_entity() -> WikidataEntity:
    return WikidataEntity.model_validate(WORK_DOC)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


class FakeKnowledgeBase:
    """In-memory `KnowledgeBase`; records every call in order."""

    def __init__(
        self,
        *,
        search: dict[str, list[str]] | None = None,
        entities: dict[str, dict[str, Any]] | None = None,
        labels: dict[str, str] | None = None,
        fail_search: bool = False,
    ) -> None:
        self._search = search or {}
        self._entities = entities or {}
        self._labels = labels if labels is not None else dict(LINKED_LABELS)
        self._fail_search = fail_search
        self.calls: list[tuple[str, str]] = []

    async def get_entity(self, entity_id: str) -> WikidataEntity | None:
        self.calls.append(("get_entity", entity_id))
        raw = self._entities.get(entity_id)
        return WikidataEntity.model_validate(raw) if raw is not None else None

    async def search_entities(self, search_term: str, language: Language = Language.ITALIAN) -> list[SearchResult]:
        self.calls.append(("search_entities", search_term))
        if self._fail_search:
            raise RuntimeError("search backend exploded")
        return [SearchResult(id=i) for i in self._search.get(search_term, [])]

    async def get_entity_label_by_id(self, entity_id: str, language: Language = Language.ITALIAN) -> str:
        self.calls.append(("label", entity_id))
        return self._labels.get(entity_id, entity_id)

    def entity_url(self, entity_id: str) -> str:
        return f"https://www.wikidata.org/wiki/{entity_id}"


@pytest.fixture
def fake_kb() -> FakeKnowledgeBase:
    return FakeKnowledgeBase(
        search={
            "Giuseppe Penone": ["Q1367437", "Q1"],
            "Albero della Vita Giuseppe Penone": ["Q98765"],
        },
        entities={"Q1367437": ARTIST_DOC, "Q98765": WORK_DOC},
    )
