"""Wikidata query client.

Two read-only JSON endpoints:
- `Special:EntityData/<id>.json` (entity by id)
- `w/api.php?action=wbsearchentities` (keyword search)

This module is pure I/O (HTTP) and therefore lives in adapters. Failures
are logged and degrade to `None` / `[]`; callers decide what "no data"
looks like on the page.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import SearchResult, WikidataEntity
from core.interfaces.knowledge_base import KnowledgeBase
from core.services.entity_fields import get_label

logger = logging.getLogger(__name__)


class WikidataClient(KnowledgeBase):
    """Thin async client over the public Wikidata endpoints."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, transport=self._transport)

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        async with self._client() as client:
            resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()

    async def get_entity(self, entity_id: str) -> WikidataEntity | None:
        url = f"{self._settings.entity_data_url}{entity_id}.json"
        try:
            data = await self._get_json(url)
            entities = data.get("entities") if isinstance(data, dict) else None
            if not isinstance(entities, dict):
                logger.error("Error fetching Wikidata entity %s: no 'entities' map", entity_id)
                return None
            raw = entities.get(entity_id)
            if raw is None and len(entities) == 1:
                # Redirected ids come back under their target id.
                raw = next(iter(entities.values()))
            if not isinstance(raw, dict):
                logger.error("Error fetching Wikidata entity %s: not in response", entity_id)
                return None
            return WikidataEntity.model_validate(raw)
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            logger.error("Error fetching Wikidata entity %s: %s", entity_id, exc)
            return None

    async def search_entities(
        self,
        search_term: str,
        language: Language = Language.ITALIAN,
    ) -> list[SearchResult]:
        params = {
            "action": "wbsearchentities",
            "search": search_term,
            "language": Language(language).value,
            "format": "json",
            "origin": "*",
        }
        try:
            data = await self._get_json(self._settings.search_api_url, params=params)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error searching Wikidata for %r: %s", search_term, exc)
            return []

        hits = data.get("search") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            logger.error("Error searching Wikidata for %r: no 'search' list", search_term)
            return []

        results: list[SearchResult] = []
        for hit in hits:
            if not isinstance(hit, dict):
                continue
            try:
                results.append(SearchResult.model_validate(hit))
            except ValidationError:
                continue
        logger.debug("Wikidata search %r -> %d result(s)", search_term, len(results))
        return results

    async def get_entity_label_by_id(
        self,
        entity_id: str,
        language: Language = Language.ITALIAN,
    ) -> str:
        entity = await self.get_entity(entity_id)
        if entity is None:
            return entity_id
        return get_label(entity, language)

    def entity_url(self, entity_id: str) -> str:
        return f"{self._settings.entity_page_url}{entity_id}"
