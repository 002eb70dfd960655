"""Extraction helpers: entity document -> human-readable strings.

Every helper returns a display string, never `None`: missing data becomes
the language's fallback text so the page always has something to show.
The only I/O is the awaited `resolve_label` used for claims that point to
another entity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Sequence

from core.domain.language import Language
from core.domain.models import WikidataEntity

LabelResolver = Callable[[str, Language], Awaitable[str]]

# Wikidata times look like +1962-00-00T00:00:00Z
_WIKIDATA_YEAR = re.compile(r"\+(\d{4})-\d{2}-\d{2}")


def get_label(entity: WikidataEntity, language: Language = Language.ITALIAN) -> str:
    text = entity.labels.get(Language(language).value)
    if text is not None:
        return text.value
    return Language(language).message("label_missing")


def get_description(entity: WikidataEntity, language: Language = Language.ITALIAN) -> str:
    text = entity.descriptions.get(Language(language).value)
    if text is not None:
        return text.value
    return Language(language).message("description_missing")


def _first_value(entity: WikidataEntity, property_id: str) -> Any:
    claims = entity.claims.get(property_id) or []
    if not claims:
        return None
    datavalue = claims[0].mainsnak.datavalue
    if datavalue is None:
        return None
    return datavalue.value


async def get_property_value(
    entity: WikidataEntity,
    property_id: str,
    language: Language = Language.ITALIAN,
    *,
    resolve_label: LabelResolver,
) -> str:
    """Display string of the first claim of `property_id`.

    Value shapes, in order: entity reference (resolved to its label), plain
    string, monolingual text, quantity (amount without the leading '+'),
    time (raw string; see `format_wikidata_date`).
    """

    language = Language(language)
    value = _first_value(entity, property_id)

    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        if value.get("id"):
            return await resolve_label(str(value["id"]), language)
        if value.get("text"):
            return str(value["text"])
        if value.get("amount"):
            return str(value["amount"]).lstrip("+")
        if value.get("time"):
            return str(value["time"])
    return language.message("property_missing")


def format_wikidata_date(value: str | None, language: Language = Language.ITALIAN) -> str:
    """Reduce a Wikidata time to its year; other strings pass through unchanged."""

    if not value:
        return Language(language).message("date_missing")
    match = _WIKIDATA_YEAR.search(value)
    if match:
        return match.group(1)
    return value


@dataclass(frozen=True)
class FieldSpec:
    """One row of a metadata panel."""

    label_key: str
    kind: str  # "label" | "description" | "property" | "date"
    property_id: str | None = None


ARTIST_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("field_name", "label"),
    FieldSpec("field_description", "description"),
    FieldSpec("field_birth_date", "date", "P569"),
    FieldSpec("field_birth_place", "property", "P19"),
    FieldSpec("field_nationality", "property", "P27"),
    FieldSpec("field_movement", "property", "P135"),
)

WORK_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("field_title", "label"),
    FieldSpec("field_description", "description"),
    FieldSpec("field_inception", "date", "P571"),
    FieldSpec("field_technique", "property", "P186"),
    FieldSpec("field_material", "property", "P186"),
    FieldSpec("field_dimensions", "property", "P2049"),
    FieldSpec("field_genre", "property", "P136"),
)


async def build_display_data(
    entity: WikidataEntity,
    fields: Sequence[FieldSpec],
    language: Language = Language.ITALIAN,
    *,
    resolve_label: LabelResolver,
) -> dict[str, str]:
    """Ordered mapping field label -> display string.

    Fields are resolved one after another so referenced-entity lookups stay
    sequential.
    """

    language = Language(language)
    data: dict[str, str] = {}
    for spec in fields:
        if spec.kind == "label":
            value = get_label(entity, language)
        elif spec.kind == "description":
            value = get_description(entity, language)
        elif spec.kind == "date":
            raw = await get_property_value(
                entity, spec.property_id or "", language, resolve_label=resolve_label
            )
            value = format_wikidata_date(raw, language)
        elif spec.kind == "property":
            value = await get_property_value(
                entity, spec.property_id or "", language, resolve_label=resolve_label
            )
        else:
            raise ValueError(f"unknown field kind: {spec.kind!r}")
        data[language.message(spec.label_key)] = value
    return data
