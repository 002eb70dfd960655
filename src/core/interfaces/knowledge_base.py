"""Knowledge-base client contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the page controller run against the real Wikidata adapter or an
  in-memory fake in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.language import Language
from core.domain.models import SearchResult, WikidataEntity


@runtime_checkable
class KnowledgeBase(Protocol):
    """Minimal read-only contract used by the page controller.

    Design rules:
    - Every method is async because it performs I/O (HTTP).
    - Methods never raise for I/O problems: they degrade to `None`, `[]`
      or, for label lookups, the entity id itself.
    """

    async def get_entity(self, entity_id: str) -> WikidataEntity | None:
        """Fetch one entity by id."""

        ...

    async def search_entities(
        self,
        search_term: str,
        language: Language = Language.ITALIAN,
    ) -> list[SearchResult]:
        """Keyword search; best match first."""

        ...

    async def get_entity_label_by_id(
        self,
        entity_id: str,
        language: Language = Language.ITALIAN,
    ) -> str:
        """Label of a referenced entity (used for entity-valued claims)."""

        ...

    def entity_url(self, entity_id: str) -> str:
        """Human-facing page of an entity."""

        ...
