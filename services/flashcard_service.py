from core.config import settings
from core.database import DocumentStore
from core.errors import NotFoundError, ValidationError
from models.flashcard import Flashcard, LegacyFlashcard
from repositories.flashcard_repo import FlashcardRepository, LegacyFlashcardRepository
from repositories.set_repo import SetRepository
from schemas.base import is_blank
from schemas.flashcard import FlashcardCreateIn, FlashcardUpdateIn, LegacyFlashcardIn

# field alias -> message when an update explicitly blanks it
NON_EMPTY_ON_UPDATE = {
    "content": "Content cannot be empty",
    "translation": "Translation cannot be empty",
    "language": "Language cannot be empty",
    "translationLang": "Translation language cannot be empty",
}


class FlashcardService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def list_cards(self, set_id: str) -> list[Flashcard]:
        """Cards of a set, for any caller.

        Set listings are public so a set can be shared by id; only the
        mutating operations below are owner-scoped.
        """
        with self.store.snapshot() as document:
            return FlashcardRepository(document).get_cards_by_set_id(set_id)

    def save_card(self, *, owner: str, set_id: str, data: FlashcardCreateIn) -> Flashcard:
        with self.store.transaction() as document:
            if SetRepository(document).get_set(set_id, owner) is None:
                raise NotFoundError("Set not found")
            required = (data.content, data.translation, data.language, data.translation_lang)
            if any(is_blank(value) for value in required):
                raise ValidationError("All fields are required")
            card = Flashcard(
                set_id=set_id,
                content=data.content,
                translation=data.translation,
                language=data.language,
                translation_lang=data.translation_lang,
                known=bool(data.known),
                owner=owner,
            )
            FlashcardRepository(document).save_card(card)
        return card

    def update_card(self, *, owner: str, set_id: str, card_id: str, data: FlashcardUpdateIn) -> Flashcard:
        updates = data.provided_fields()
        for field, message in NON_EMPTY_ON_UPDATE.items():
            if field in updates and is_blank(updates[field]):
                raise ValidationError(message)
        with self.store.transaction() as document:
            card = FlashcardRepository(document).update_card(
                set_id=set_id,
                card_id=card_id,
                owner=owner,
                updates=updates,
            )
            if card is None:
                raise NotFoundError("Flashcard not found")
        return card

    def delete_card(self, *, owner: str, set_id: str, card_id: str) -> None:
        with self.store.transaction() as document:
            if not FlashcardRepository(document).delete_card(set_id=set_id, card_id=card_id, owner=owner):
                raise NotFoundError("Flashcard not found")

    def set_known(self, *, owner: str, set_id: str, card_id: str, known: bool | None) -> Flashcard:
        # sets the flag to the given value, it does not flip the stored one
        if not isinstance(known, bool):
            raise ValidationError("Known status must be a boolean")
        with self.store.transaction() as document:
            card = FlashcardRepository(document).update_card(
                set_id=set_id,
                card_id=card_id,
                owner=owner,
                updates={"known": known},
            )
            if card is None:
                raise NotFoundError("Flashcard not found")
        return card


class LegacyFlashcardService:
    """Set-independent cards kept for older clients."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def _require_all(data: LegacyFlashcardIn) -> None:
        fields = (data.front, data.back, data.language_front, data.language_back)
        if any(is_blank(value) for value in fields):
            raise ValidationError("All fields are required")

    def save_card(self, *, owner: str, data: LegacyFlashcardIn) -> LegacyFlashcard:
        self._require_all(data)
        card = LegacyFlashcard(
            front=data.front,
            back=data.back,
            language_front=data.language_front,
            language_back=data.language_back,
            owner=owner,
        )
        with self.store.transaction() as document:
            LegacyFlashcardRepository(document).save_card(card)
        return card

    def list_cards(self, owner: str) -> list[LegacyFlashcard]:
        with self.store.snapshot() as document:
            return LegacyFlashcardRepository(document).list_cards(owner)

    def update_card(self, *, owner: str, card_id: str, data: LegacyFlashcardIn) -> LegacyFlashcard:
        if not settings.LEGACY_FLASHCARD_MUTATIONS:
            raise NotFoundError("Flashcard not found")
        with self.store.transaction() as document:
            repo = LegacyFlashcardRepository(document)
            if repo.get_card(card_id, owner) is None:
                raise NotFoundError("Flashcard not found")
            self._require_all(data)
            card = repo.update_card(card_id=card_id, owner=owner, updates=data.provided_fields())
        return card

    def delete_card(self, *, owner: str, card_id: str) -> LegacyFlashcard:
        if not settings.LEGACY_FLASHCARD_MUTATIONS:
            raise NotFoundError("Flashcard not found")
        with self.store.transaction() as document:
            card = LegacyFlashcardRepository(document).delete_card(card_id=card_id, owner=owner)
            if card is None:
                raise NotFoundError("Flashcard not found")
        return card
