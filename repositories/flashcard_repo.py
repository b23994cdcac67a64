from typing import Any

from core.database import Document
from models.flashcard import Flashcard, LegacyFlashcard


class FlashcardRepository:
    """Set-scoped cards: records of the ``flashcards`` collection that carry a ``setId``."""

    def __init__(self, document: Document):
        self.cards = document["flashcards"]

    def _find_index(self, *, set_id: str, card_id: str, owner: str) -> int | None:
        for idx, record in enumerate(self.cards):
            if (
                record.get("id") == card_id
                and record.get("setId") == set_id
                and record.get("owner") == owner
            ):
                return idx
        return None

    def save_card(self, card: Flashcard) -> Flashcard:
        self.cards.append(card.to_document())
        return card

    def get_cards_by_set_id(self, set_id: str) -> list[Flashcard]:
        return [Flashcard.model_validate(record) for record in self.cards if record.get("setId") == set_id]

    def get_cards_by_set_ids(self, set_ids: set[str]) -> list[Flashcard]:
        return [Flashcard.model_validate(record) for record in self.cards if record.get("setId") in set_ids]

    def update_card(self, *, set_id: str, card_id: str, owner: str, updates: dict[str, Any]) -> Flashcard | None:
        idx = self._find_index(set_id=set_id, card_id=card_id, owner=owner)
        if idx is None:
            return None
        self.cards[idx].update(updates)
        return Flashcard.model_validate(self.cards[idx])

    def delete_card(self, *, set_id: str, card_id: str, owner: str) -> bool:
        idx = self._find_index(set_id=set_id, card_id=card_id, owner=owner)
        if idx is None:
            return False
        del self.cards[idx]
        return True

    def delete_cards_by_set_id(self, set_id: str) -> int:
        kept = [record for record in self.cards if record.get("setId") != set_id]
        removed = len(self.cards) - len(kept)
        # mutate in place so the document keeps the same list object
        self.cards[:] = kept
        return removed


class LegacyFlashcardRepository:
    def __init__(self, document: Document):
        self.cards = document["flashcards"]

    def _find_index(self, card_id: str, owner: str) -> int | None:
        for idx, record in enumerate(self.cards):
            if record.get("id") == card_id and record.get("owner") == owner and "setId" not in record:
                return idx
        return None

    def save_card(self, card: LegacyFlashcard) -> LegacyFlashcard:
        self.cards.append(card.to_document())
        return card

    def list_cards(self, owner: str) -> list[LegacyFlashcard]:
        return [
            LegacyFlashcard.model_validate(record)
            for record in self.cards
            if record.get("owner") == owner and "setId" not in record
        ]

    def get_card(self, card_id: str, owner: str) -> LegacyFlashcard | None:
        idx = self._find_index(card_id, owner)
        if idx is None:
            return None
        return LegacyFlashcard.model_validate(self.cards[idx])

    def update_card(self, *, card_id: str, owner: str, updates: dict[str, Any]) -> LegacyFlashcard | None:
        idx = self._find_index(card_id, owner)
        if idx is None:
            return None
        self.cards[idx].update(updates)
        return LegacyFlashcard.model_validate(self.cards[idx])

    def delete_card(self, *, card_id: str, owner: str) -> LegacyFlashcard | None:
        idx = self._find_index(card_id, owner)
        if idx is None:
            return None
        return LegacyFlashcard.model_validate(self.cards.pop(idx))
