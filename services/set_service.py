import logging

from core.database import DocumentStore
from core.errors import NotFoundError, ValidationError
from models.study_set import StudySet
from repositories.flashcard_repo import FlashcardRepository
from repositories.set_repo import SetRepository
from schemas.base import is_blank
from schemas.study_set import SetCreateIn, SetUpdateIn

logger = logging.getLogger(__name__)


class SetService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def save_set(self, *, owner: str, data: SetCreateIn) -> StudySet:
        required = (data.name, data.description, data.default_language, data.translation_language)
        if any(is_blank(value) for value in required):
            raise ValidationError("Missing required fields")
        study_set = StudySet(
            name=data.name,
            description=data.description,
            default_language=data.default_language,
            translation_language=data.translation_language,
            owner=owner,
        )
        with self.store.transaction() as document:
            SetRepository(document).save_set(study_set)
        return study_set

    def list_sets(self, owner: str) -> list[StudySet]:
        with self.store.snapshot() as document:
            return SetRepository(document).list_sets(owner)

    def update_set(self, *, owner: str, set_id: str, data: SetUpdateIn) -> StudySet:
        with self.store.transaction() as document:
            study_set = SetRepository(document).update_set(
                set_id=set_id,
                owner=owner,
                updates=data.provided_fields(),
            )
            if study_set is None:
                raise NotFoundError("Set not found")
        return study_set

    def delete_set(self, *, owner: str, set_id: str) -> StudySet:
        """Remove the set together with every card that references it."""
        with self.store.transaction() as document:
            study_set = SetRepository(document).delete_set(set_id=set_id, owner=owner)
            if study_set is None:
                raise NotFoundError("Set not found")
            removed = FlashcardRepository(document).delete_cards_by_set_id(set_id)
        logger.info("Deleted set %s of %s with %d flashcards", set_id, owner, removed)
        return study_set
