"""Project detail page controller.

This module owns the whole page-load flow: write the query parameters into
the page, run the artist and work lookups one after another, fill the two
metadata panels and toggle the loading / content / error states. It only
talks to a `KnowledgeBase` and a `ProjectPage`, so the same flow serves the
CLI, the HTML export and the tests.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import ErrorPanel, MetadataPanel, ProjectPage, ProjectQuery, WikidataEntity
from core.interfaces.knowledge_base import KnowledgeBase
from core.services.entity_fields import ARTIST_FIELDS, WORK_FIELDS, build_display_data

logger = logging.getLogger(__name__)


class EntityUnavailableError(RuntimeError):
    """A search hit whose entity document could not be fetched."""


class ProjectDetailController:
    """Drives one page view; `init()` returns the final page state."""

    def __init__(
        self,
        client: KnowledgeBase,
        query: ProjectQuery,
        *,
        language: Language | None = None,
        settings: AppSettings | None = None,
        page: ProjectPage | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.client = client
        self.query = query
        self.language = Language(language or self._settings.default_language)
        self.page = page or ProjectPage(language=self.language.value)

    async def init(self) -> ProjectPage:
        self.show_loading()

        try:
            self.page.project_title = self.query.work
            self.page.project_artist = self.query.artist
            self.page.project_year = self.query.year
            self.page.document_title = (
                f"{self.query.work} - {self.query.artist} | {self._settings.site_name}"
            )

            await self.load_artist_data()
            await self.load_work_data()

            self.hide_loading()
            self.show_content()
        except Exception:
            logger.exception("Error initializing project page for %r", self.query.work)
            self.hide_loading()
            self.show_content()
            self.show_error()

        return self.page

    async def _fetch_first(self, search_term: str) -> WikidataEntity | None:
        results = await self.client.search_entities(search_term, self.language)
        if not results:
            return None
        entity_id = results[0].id
        entity = await self.client.get_entity(entity_id)
        if entity is None:
            raise EntityUnavailableError(f"entity {entity_id} could not be fetched")
        return entity

    async def load_artist_data(self) -> None:
        artist = await self._fetch_first(self.query.artist)
        if artist is None:
            self.display_no_artist_data()
            return
        await self.display_artist_data(artist)

    async def load_work_data(self) -> None:
        work = await self._fetch_first(f"{self.query.work} {self.query.artist}")
        if work is None:
            self.display_no_work_data()
            return
        await self.display_work_data(work)

        link = self.page.view_on_wikidata
        link.href = self.client.entity_url(work.id)
        link.disabled = False

    async def display_artist_data(self, artist: WikidataEntity) -> None:
        entries = await build_display_data(
            artist,
            ARTIST_FIELDS,
            self.language,
            resolve_label=self.client.get_entity_label_by_id,
        )
        self.page.artist_wikidata = MetadataPanel(entries=entries, entity_id=artist.id)

    async def display_work_data(self, work: WikidataEntity) -> None:
        entries = await build_display_data(
            work,
            WORK_FIELDS,
            self.language,
            resolve_label=self.client.get_entity_label_by_id,
        )
        self.page.work_wikidata = MetadataPanel(entries=entries, entity_id=work.id)

    def display_no_artist_data(self) -> None:
        logger.info("No Wikidata match for artist %r", self.query.artist)
        self.page.artist_wikidata = MetadataPanel(
            notice=self.language.message("no_artist", name=self.query.artist)
        )

    def display_no_work_data(self) -> None:
        logger.info("No Wikidata match for work %r", self.query.work)
        self.page.work_wikidata = MetadataPanel(
            notice=self.language.message("no_work", name=self.query.work)
        )

    def show_loading(self) -> None:
        self.page.loading_visible = True
        self.page.content_visible = False

    def hide_loading(self) -> None:
        self.page.loading_visible = False

    def show_content(self) -> None:
        self.page.content_visible = True

    def show_error(self) -> None:
        year = self._settings.edition_year
        self.page.error = ErrorPanel(
            title=self.language.message("error_title"),
            body=self.language.message("error_body"),
            back_href=f"edition-{year}.html",
            back_text=self.language.message("error_back", year=year),
        )


async def load_project_page(
    client: KnowledgeBase,
    query: ProjectQuery,
    *,
    language: Language | None = None,
    settings: AppSettings | None = None,
) -> ProjectPage:
    """One-shot helper: build a controller and run it."""

    controller = ProjectDetailController(client, query, language=language, settings=settings)
    return await controller.init()
