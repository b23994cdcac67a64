from datetime import datetime

from pydantic import Field

from models.base import Record, new_id, utcnow


class Flashcard(Record):
    """Card that belongs to a study set."""

    id: str = Field(default_factory=new_id)
    set_id: str
    content: str
    translation: str
    language: str
    translation_lang: str
    known: bool = False
    owner: str
    created_at: datetime = Field(default_factory=utcnow)


class LegacyFlashcard(Record):
    """Older set-independent card. Stored in the same collection, without ``setId``."""

    id: str = Field(default_factory=new_id)
    front: str
    back: str
    language_front: str
    language_back: str
    owner: str
    created_at: datetime = Field(default_factory=utcnow)
