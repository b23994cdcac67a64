"""Delimited-text layout of an exported set.

One header row, then one row per card. Every data row repeats the set
metadata so a single file is enough to rebuild the set on import.
"""
import csv
import io
from typing import Any, Iterable

from core.errors import ValidationError
from models.flashcard import Flashcard
from models.study_set import StudySet

HEADER = [
    "Set Name",
    "Set Description",
    "Default Language",
    "Translation Language",
    "Content",
    "Translation",
    "Language",
    "Translation Language",
    "Known",
    "Created At",
]

MIN_COLUMNS = 8
DEFAULT_LANGUAGE = "EN"
DEFAULT_TRANSLATION_LANGUAGE = "PL"


def _format_timestamp(card: Flashcard) -> str:
    return card.created_at.isoformat().replace("+00:00", "Z")


def encode_set(study_set: StudySet, cards: Iterable[Flashcard]) -> str:
    buffer = io.StringIO()
    # header is plain, data cells are always quoted with embedded quotes doubled
    csv.writer(buffer, lineterminator="\n").writerow(HEADER)
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for card in cards:
        writer.writerow(
            [
                study_set.name,
                study_set.description,
                study_set.default_language,
                study_set.translation_language,
                card.content,
                card.translation,
                card.language,
                card.translation_lang,
                "true" if card.known else "false",
                _format_timestamp(card),
            ]
        )
    return buffer.getvalue()


def decode_set(text: str) -> dict[str, Any]:
    """Parse an exported CSV back into the structured import payload.

    Cards with empty content or translation are kept here; the importer
    decides to skip them.
    """
    rows = [
        [cell.strip() for cell in row]
        for row in csv.reader(io.StringIO(text))
        if any(cell.strip() for cell in row)
    ]
    if len(rows) < 2:
        raise ValidationError("CSV must contain a header row and at least one data row")

    data_rows = rows[1:]
    if any(len(row) < MIN_COLUMNS for row in data_rows):
        raise ValidationError(f"CSV rows must have at least {MIN_COLUMNS} columns")

    first = data_rows[0]
    set_data = {
        "name": first[0],
        "description": first[1],
        "defaultLanguage": first[2] or DEFAULT_LANGUAGE,
        "translationLanguage": first[3] or DEFAULT_TRANSLATION_LANGUAGE,
    }

    flashcards = []
    for row in data_rows:
        flashcards.append(
            {
                "content": row[4],
                "translation": row[5],
                "language": row[6] or set_data["defaultLanguage"],
                "translationLang": row[7] or set_data["translationLanguage"],
                "known": len(row) > 8 and row[8].lower() == "true",
            }
        )
    return {"set": set_data, "flashcards": flashcards}
