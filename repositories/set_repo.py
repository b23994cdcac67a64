from typing import Any

from core.database import Document
from models.study_set import StudySet


class SetRepository:
    def __init__(self, document: Document):
        self.sets = document["sets"]

    def _find_index(self, set_id: str, owner: str) -> int | None:
        for idx, record in enumerate(self.sets):
            if record.get("id") == set_id and record.get("owner") == owner:
                return idx
        return None

    def save_set(self, study_set: StudySet) -> StudySet:
        self.sets.append(study_set.to_document())
        return study_set

    def list_sets(self, owner: str) -> list[StudySet]:
        return [StudySet.model_validate(record) for record in self.sets if record.get("owner") == owner]

    def get_set(self, set_id: str, owner: str) -> StudySet | None:
        idx = self._find_index(set_id, owner)
        if idx is None:
            return None
        return StudySet.model_validate(self.sets[idx])

    def update_set(self, *, set_id: str, owner: str, updates: dict[str, Any]) -> StudySet | None:
        idx = self._find_index(set_id, owner)
        if idx is None:
            return None
        self.sets[idx].update(updates)
        return StudySet.model_validate(self.sets[idx])

    def delete_set(self, *, set_id: str, owner: str) -> StudySet | None:
        idx = self._find_index(set_id, owner)
        if idx is None:
            return None
        return StudySet.model_validate(self.sets.pop(idx))
