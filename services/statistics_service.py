from core.database import DocumentStore
from repositories.flashcard_repo import FlashcardRepository
from repositories.set_repo import SetRepository
from schemas.statistics import SetStatistics, Statistics


class StatisticsService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def get_statistics(self, owner: str) -> Statistics:
        """Counts over the caller's sets and the cards in them, computed on every call."""
        with self.store.snapshot() as document:
            sets = SetRepository(document).list_sets(owner)
            cards = FlashcardRepository(document).get_cards_by_set_ids({s.id for s in sets})

        per_set = []
        for study_set in sets:
            set_cards = [card for card in cards if card.set_id == study_set.id]
            known = sum(1 for card in set_cards if card.known)
            per_set.append(
                SetStatistics(
                    set_id=study_set.id,
                    name=study_set.name,
                    card_count=len(set_cards),
                    known_count=known,
                    unknown_count=len(set_cards) - known,
                )
            )

        total_known = sum(1 for card in cards if card.known)
        return Statistics(
            total_sets=len(sets),
            total_flashcards=len(cards),
            total_known_cards=total_known,
            total_unknown_cards=len(cards) - total_known,
            set_statistics=per_set,
        )
