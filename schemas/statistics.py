from schemas.base import CamelModel


class SetStatistics(CamelModel):
    set_id: str
    name: str
    card_count: int
    known_count: int
    unknown_count: int


class Statistics(CamelModel):
    total_sets: int
    total_flashcards: int
    total_known_cards: int
    total_unknown_cards: int
    set_statistics: list[SetStatistics]
