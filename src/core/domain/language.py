"""Language utilities for the Eco Archive.

This module centralizes the language options supported across the
application together with every user-facing string of the project page.
Keeping it in the domain layer allows the extraction helpers, the page
controller and the CLI to share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for search and page output."""

    ITALIAN = "it"
    ENGLISH = "en"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ITALIAN

    @classmethod
    def parse(cls, value: str | None) -> "Language":
        """Lenient parsing for CLI/query input; unknown values fall back to the default."""

        if not value:
            return cls.default()
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.default()

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "English" if self is Language.ENGLISH else "Italian"

    def message(self, key: str, **kwargs: str) -> str:
        """Look up a page text in this language and format its placeholders."""

        template = _MESSAGES[self][key]
        return template.format(**kwargs) if kwargs else template


_MESSAGES: dict[Language, dict[str, str]] = {
    Language.ITALIAN: {
        "label_missing": "Informazione non disponibile",
        "description_missing": "Descrizione non disponibile",
        "property_missing": "Non specificato",
        "date_missing": "Data non disponibile",
        "no_artist": 'Nessun dato trovato su Wikidata per l\'artista "{name}".',
        "no_work": 'Nessun dato trovato su Wikidata per l\'opera "{name}".',
        "error_title": "Errore nel caricamento dei dati",
        "error_body": "Si è verificato un errore durante il caricamento delle informazioni da Wikidata.",
        "error_back": "Torna all'edizione {year}",
        "field_name": "Nome",
        "field_title": "Titolo",
        "field_description": "Descrizione",
        "field_birth_date": "Data di nascita",
        "field_birth_place": "Luogo di nascita",
        "field_nationality": "Nazionalità",
        "field_movement": "Movimento artistico",
        "field_inception": "Data di creazione",
        "field_technique": "Tecnica",
        "field_material": "Materiale",
        "field_dimensions": "Dimensioni",
        "field_genre": "Genere",
        "section_artist": "Artista su Wikidata",
        "section_work": "Opera su Wikidata",
        "view_on_wikidata": "Vedi su Wikidata",
        "loading": "Caricamento dati da Wikidata...",
    },
    Language.ENGLISH: {
        "label_missing": "Information not available",
        "description_missing": "Description not available",
        "property_missing": "Not specified",
        "date_missing": "Date not available",
        "no_artist": 'No Wikidata data found for the artist "{name}".',
        "no_work": 'No Wikidata data found for the work "{name}".',
        "error_title": "Error while loading data",
        "error_body": "An error occurred while loading information from Wikidata.",
        "error_back": "Back to the {year} edition",
        "field_name": "Name",
        "field_title": "Title",
        "field_description": "Description",
        "field_birth_date": "Date of birth",
        "field_birth_place": "Place of birth",
        "field_nationality": "Nationality",
        "field_movement": "Art movement",
        "field_inception": "Date of creation",
        "field_technique": "Technique",
        "field_material": "Material",
        "field_dimensions": "Dimensions",
        "field_genre": "Genre",
        "section_artist": "Artist on Wikidata",
        "section_work": "Work on Wikidata",
        "view_on_wikidata": "View on Wikidata",
        "loading": "Loading data from Wikidata...",
    },
}
