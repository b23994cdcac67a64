from schemas.base import CamelModel


class SetCreateIn(CamelModel):
    name: str | None = None
    description: str | None = None
    default_language: str | None = None
    translation_language: str | None = None


class SetUpdateIn(SetCreateIn):
    pass
