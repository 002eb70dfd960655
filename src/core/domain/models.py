"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting models (Field) without coupling
  the Core to I/O libraries.
- Wikidata documents are large and loosely shaped; `extra="ignore"` keeps
  only what the page needs.

Note:
- These models describe *what* the information is, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LocalizedText(BaseModel):
    """One entry of an entity's `labels` / `descriptions` maps."""

    model_config = ConfigDict(extra="ignore")

    language: str = Field(default="", description="Language code (p.ej. 'it').")
    value: str = Field(..., description="Text in that language.")


class DataValue(BaseModel):
    """Typed value of a snak.

    `value` stays untyped: it is a plain string, or a dict shaped like an
    entity reference (`id`), monolingual text (`text`), quantity (`amount`)
    or time (`time`).
    """

    model_config = ConfigDict(extra="ignore")

    value: Any = None
    type: str | None = None


class Snak(BaseModel):
    model_config = ConfigDict(extra="ignore")

    snaktype: str | None = None
    property: str | None = None
    datavalue: DataValue | None = None


class Claim(BaseModel):
    model_config = ConfigDict(extra="ignore")

    mainsnak: Snak = Field(default_factory=Snak)
    rank: str | None = None


class WikidataEntity(BaseModel):
    """An entity record as returned by `Special:EntityData/<id>.json`."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Entity id (p.ej. 'Q12345').")
    labels: dict[str, LocalizedText] = Field(default_factory=dict)
    descriptions: dict[str, LocalizedText] = Field(default_factory=dict)
    claims: dict[str, list[Claim]] = Field(default_factory=dict)


class SearchResult(BaseModel):
    """One hit of `wbsearchentities`."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    label: str | None = None
    description: str | None = None
    concepturi: str | None = None


class ProjectQuery(BaseModel):
    """The three page parameters (`artist`, `work`, `year`)."""

    artist: str = Field(default="Giuseppe Penone", min_length=1)
    work: str = Field(default="Albero della Vita", min_length=1)
    year: str = Field(default="1962", min_length=1)

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        defaults: "ProjectQuery | None" = None,
    ) -> "ProjectQuery":
        """Build the query from a page URL or a bare query string.

        Missing or empty parameters take the default value; repeated
        parameters keep their first occurrence.
        """

        defaults = defaults or cls()
        query = urlsplit(url).query if ("?" in url or "://" in url) else url
        params = parse_qs(query, keep_blank_values=True)

        def _first(name: str, fallback: str) -> str:
            values = params.get(name) or []
            value = values[0].strip() if values else ""
            return value or fallback

        return cls(
            artist=_first("artist", defaults.artist),
            work=_first("work", defaults.work),
            year=_first("year", defaults.year),
        )


class MetadataPanel(BaseModel):
    """Content of a metadata container (`artistWikidata` / `workWikidata`).

    Either `entries` (field label -> formatted string, in display order) or
    a `notice` when nothing was found.
    """

    entries: dict[str, str] = Field(default_factory=dict)
    notice: str | None = Field(default=None, description="'No data found' warning text.")
    entity_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries and self.notice is None


class WikidataLink(BaseModel):
    """The `viewOnWikidata` link."""

    href: str = "#"
    disabled: bool = True


class ErrorPanel(BaseModel):
    title: str
    body: str
    back_href: str
    back_text: str


class ProjectPage(BaseModel):
    """State of the project detail page, one slot per element id.

    The controller is its only writer; renderers only read it.
    """

    document_title: str = ""
    project_title: str = Field(default="", description="#projectTitle")
    project_artist: str = Field(default="", description="#projectArtist")
    project_year: str = Field(default="", description="#projectYear")
    artist_wikidata: MetadataPanel = Field(default_factory=MetadataPanel, description="#artistWikidata")
    work_wikidata: MetadataPanel = Field(default_factory=MetadataPanel, description="#workWikidata")
    view_on_wikidata: WikidataLink = Field(default_factory=WikidataLink, description="#viewOnWikidata")
    loading_visible: bool = Field(default=False, description="#loadingSpinner display")
    content_visible: bool = Field(default=False, description="#projectContent display")
    error: ErrorPanel | None = Field(
        default=None,
        description="When set, replaces the whole #projectContent markup.",
    )
    language: str = "it"
