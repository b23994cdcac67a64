from datetime import datetime

from pydantic import Field

from models.base import Record, new_id, utcnow


class StudySet(Record):
    id: str = Field(default_factory=new_id)
    name: str
    description: str = ""
    default_language: str
    translation_language: str
    owner: str
    created_at: datetime = Field(default_factory=utcnow)
