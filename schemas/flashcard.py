from pydantic import StrictBool

from schemas.base import CamelModel


class FlashcardCreateIn(CamelModel):
    content: str | None = None
    translation: str | None = None
    language: str | None = None
    translation_lang: str | None = None
    known: StrictBool | None = None


class FlashcardUpdateIn(FlashcardCreateIn):
    pass


class FlashcardKnownIn(CamelModel):
    known: StrictBool | None = None


class LegacyFlashcardIn(CamelModel):
    front: str | None = None
    back: str | None = None
    language_front: str | None = None
    language_back: str | None = None
