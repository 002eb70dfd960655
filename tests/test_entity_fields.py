"""Extraction helpers: labels, descriptions, claim values and dates."""

from __future__ import annotations

import asyncio

import pytest

from conftest import LINKED_LABELS
from core.domain.language import Language
from core.domain.models import WikidataEntity
from core.services.entity_fields import (
    ARTIST_FIELDS,
    WORK_FIELDS,
    FieldSpec,
    build_display_data,
    format_wikidata_date,
    get_description,
    get_label,
    get_property_value,
)


async def _resolve(entity_id: str, language: Language) -> str:
    return LINKED_LABELS.get(entity_id, entity_id)


def _value(entity: WikidataEntity, property_id: str, language: Language = Language.ITALIAN) -> str:
    return asyncio.run(get_property_value(entity, property_id, language, resolve_label=_resolve))


def test_label_and_description_in_language(artist_entity):
    assert get_label(artist_entity) == "Giuseppe Penone"
    assert get_description(artist_entity) == "scultore italiano"


def test_label_fallbacks_are_language_specific(work_entity):
    assert get_label(work_entity, Language.ENGLISH) == "Information not available"
    assert get_description(work_entity) == "Descrizione non disponibile"
    assert get_description(work_entity, Language.ENGLISH) == "Description not available"


def test_entity_reference_is_resolved_to_label(artist_entity):
    assert _value(artist_entity, "P27") == "Italia"
    assert _value(artist_entity, "P135") == "Arte povera"


def test_scalar_value_shapes(work_entity):
    assert _value(work_entity, "P217") == "INV-1962-07"
    assert _value(work_entity, "P1476") == "Albero della Vita"
    assert _value(work_entity, "P2049") == "120"
    assert _value(work_entity, "P571") == "+1962-00-00T00:00:00Z"


def test_missing_property_and_missing_datavalue():
    entity = WikidataEntity.model_validate(
        {
            "id": "Q5",
            "claims": {"P19": [{"mainsnak": {"snaktype": "somevalue", "property": "P19"}}]},
        }
    )
    assert _value(entity, "P19") == "Non specificato"
    assert _value(entity, "P999") == "Non specificato"
    assert _value(entity, "P999", Language.ENGLISH) == "Not specified"


def test_unknown_value_shape_falls_back():
    entity = WikidataEntity.model_validate(
        {
            "id": "Q5",
            "claims": {"P625": [{"mainsnak": {"datavalue": {"value": {"latitude": 45.1, "longitude": 8.0}}}}]},
        }
    )
    assert _value(entity, "P625") == "Non specificato"


def test_only_first_claim_is_used():
    entity = WikidataEntity.model_validate(
        {
            "id": "Q5",
            "claims": {
                "P136": [
                    {"mainsnak": {"datavalue": {"value": "scultura"}}},
                    {"mainsnak": {"datavalue": {"value": "installazione"}}},
                ]
            },
        }
    )
    assert _value(entity, "P136") == "scultura"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("+1962-00-00T00:00:00Z", "1962"),
        ("+1947-04-03T00:00:00Z", "1947"),
        ("Non specificato", "Non specificato"),
        ("-0500-00-00T00:00:00Z", "-0500-00-00T00:00:00Z"),
        ("", "Data non disponibile"),
        (None, "Data non disponibile"),
    ],
)
def test_format_wikidata_date(raw, expected):
    assert format_wikidata_date(raw) == expected


def test_artist_display_data_order_and_values(artist_entity):
    data = asyncio.run(build_display_data(artist_entity, ARTIST_FIELDS, resolve_label=_resolve))
    assert list(data.items()) == [
        ("Nome", "Giuseppe Penone"),
        ("Descrizione", "scultore italiano"),
        ("Data di nascita", "1947"),
        ("Luogo di nascita", "Garessio"),
        ("Nazionalità", "Italia"),
        ("Movimento artistico", "Arte povera"),
    ]


def test_work_display_data_in_english(work_entity):
    data = asyncio.run(build_display_data(work_entity, WORK_FIELDS, Language.ENGLISH, resolve_label=_resolve))
    assert data == {
        "Title": "Information not available",
        "Description": "Description not available",
        "Date of creation": "1962",
        "Technique": "legno",
        "Material": "legno",
        "Dimensions": "120",
        "Genre": "Not specified",
    }


def test_unknown_field_kind_is_rejected(artist_entity):
    with pytest.raises(ValueError):
        asyncio.run(build_display_data(artist_entity, [FieldSpec("field_name", "bogus")], resolve_label=_resolve))
