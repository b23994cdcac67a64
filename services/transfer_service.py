import logging
import re
from typing import Any

from core.database import DocumentStore
from core.errors import NotFoundError, ValidationError
from models.flashcard import Flashcard
from models.study_set import StudySet
from repositories.flashcard_repo import FlashcardRepository
from repositories.set_repo import SetRepository
from services import csv_codec

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def export_filename(name: str | None, set_id: str, extension: str) -> str:
    """Create a filesystem-friendly filename for set exports."""
    if name:
        slug = re.sub(r"[^A-Za-z0-9]+", "-", name.lower()).strip("-")
    else:
        slug = ""
    if not slug:
        slug = f"set-{set_id}"
    return f"{slug}.{extension}"


class TransferService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def _load(self, owner: str, set_id: str) -> tuple[StudySet, list[Flashcard]]:
        with self.store.snapshot() as document:
            study_set = SetRepository(document).get_set(set_id, owner)
            if study_set is None:
                raise NotFoundError("Set not found")
            cards = FlashcardRepository(document).get_cards_by_set_id(set_id)
        return study_set, cards

    def export_set(self, *, owner: str, set_id: str, fmt: str = "json") -> tuple[StudySet, dict | str]:
        """Return the set and its payload: a dict for json, text for csv."""
        fmt = (fmt or "json").lower()
        if fmt not in EXPORT_FORMATS:
            raise ValidationError("Unsupported export format")
        study_set, cards = self._load(owner, set_id)
        if fmt == "csv":
            return study_set, csv_codec.encode_set(study_set, cards)
        return study_set, {"set": study_set, "flashcards": cards, "totalCards": len(cards)}

    def import_set(self, *, owner: str, payload: Any) -> tuple[StudySet, list[Flashcard]]:
        """Create a new set from an export payload.

        Entries without content or translation are skipped. The set and its
        cards are written in a single transaction.
        """
        if not isinstance(payload, dict):
            raise ValidationError("Invalid data format")
        set_data = payload.get("set")
        entries = payload.get("flashcards")
        if not isinstance(set_data, dict) or not isinstance(entries, list):
            raise ValidationError("Invalid data format")

        name = _text(set_data.get("name"))
        if not name:
            raise ValidationError("Set name is required")

        study_set = StudySet(
            name=name,
            description=_text(set_data.get("description")),
            default_language=_text(set_data.get("defaultLanguage")) or csv_codec.DEFAULT_LANGUAGE,
            translation_language=_text(set_data.get("translationLanguage")) or csv_codec.DEFAULT_TRANSLATION_LANGUAGE,
            owner=owner,
        )

        cards = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            content = _text(entry.get("content"))
            translation = _text(entry.get("translation"))
            if not content or not translation:
                continue
            cards.append(
                Flashcard(
                    set_id=study_set.id,
                    content=content,
                    translation=translation,
                    language=_text(entry.get("language")) or study_set.default_language,
                    translation_lang=_text(entry.get("translationLang")) or study_set.translation_language,
                    known=entry.get("known") is True,
                    owner=owner,
                )
            )

        with self.store.transaction() as document:
            SetRepository(document).save_set(study_set)
            card_repo = FlashcardRepository(document)
            for card in cards:
                card_repo.save_card(card)

        logger.info("Imported set %s for %s: %d of %d flashcards", study_set.id, owner, len(cards), len(entries))
        return study_set, cards

    def import_csv(self, *, owner: str, text: str) -> tuple[StudySet, list[Flashcard]]:
        return self.import_set(owner=owner, payload=csv_codec.decode_set(text))
