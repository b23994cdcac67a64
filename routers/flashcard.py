from fastapi import APIRouter, Depends

from core.database import DocumentStore, get_store
from core.errors import storage_failure
from models.flashcard import Flashcard
from schemas.auth import TokenPayload
from schemas.flashcard import (
    FlashcardCreateIn,
    FlashcardKnownIn,
    FlashcardUpdateIn,
    LegacyFlashcardIn,
)
from services.flashcard_service import FlashcardService, LegacyFlashcardService
from .auth import access_token_required

router = APIRouter(prefix="/api", tags=["Flashcard"])


# Set-scoped cards

@router.get(
    "/sets/{set_id}/flashcards",
    response_model=list[Flashcard],
)
async def list_flashcards_for_set(
    set_id: str,
    store: DocumentStore = Depends(get_store),
):
    # Public on purpose: a set's cards can be listed by anyone who knows its id.
    svc = FlashcardService(store)
    with storage_failure("Failed to fetch flashcards"):
        return svc.list_cards(set_id)


@router.post(
    "/sets/{set_id}/flashcards",
    response_model=Flashcard,
)
async def add_flashcard_to_set(
    set_id: str,
    data: FlashcardCreateIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = FlashcardService(store)
    with storage_failure("Failed to add flashcard"):
        return svc.save_card(owner=payload.sub, set_id=set_id, data=data)


@router.put(
    "/sets/{set_id}/flashcards/{card_id}",
    response_model=Flashcard,
)
async def update_flashcard_in_set(
    set_id: str,
    card_id: str,
    data: FlashcardUpdateIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = FlashcardService(store)
    with storage_failure("Failed to update flashcard"):
        return svc.update_card(owner=payload.sub, set_id=set_id, card_id=card_id, data=data)


@router.delete("/sets/{set_id}/flashcards/{card_id}")
async def delete_flashcard_from_set(
    set_id: str,
    card_id: str,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = FlashcardService(store)
    with storage_failure("Failed to delete flashcard"):
        svc.delete_card(owner=payload.sub, set_id=set_id, card_id=card_id)
    return {"success": True, "message": "Flashcard deleted successfully"}


@router.patch(
    "/sets/{set_id}/flashcards/{card_id}/known",
    response_model=Flashcard,
)
async def update_flashcard_known_status(
    set_id: str,
    card_id: str,
    data: FlashcardKnownIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = FlashcardService(store)
    with storage_failure("Failed to update flashcard known status"):
        return svc.set_known(owner=payload.sub, set_id=set_id, card_id=card_id, known=data.known)


# Legacy set-independent cards

@router.post("/flashcards")
async def create_legacy_flashcard(
    data: LegacyFlashcardIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = LegacyFlashcardService(store)
    with storage_failure("Failed to add flashcard"):
        card = svc.save_card(owner=payload.sub, data=data)
    return {"success": True, "message": "Flashcard added successfully", "flashcard": card}


@router.get("/flashcards")
async def list_legacy_flashcards(
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = LegacyFlashcardService(store)
    with storage_failure("Failed to fetch flashcards"):
        cards = svc.list_cards(payload.sub)
    return {"success": True, "flashcards": cards}


@router.put("/flashcards/{card_id}")
async def update_legacy_flashcard(
    card_id: str,
    data: LegacyFlashcardIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = LegacyFlashcardService(store)
    with storage_failure("Failed to update flashcard"):
        card = svc.update_card(owner=payload.sub, card_id=card_id, data=data)
    return {"success": True, "message": "Flashcard updated successfully", "flashcard": card}


@router.delete("/flashcards/{card_id}")
async def delete_legacy_flashcard(
    card_id: str,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = LegacyFlashcardService(store)
    with storage_failure("Failed to delete flashcard"):
        card = svc.delete_card(owner=payload.sub, card_id=card_id)
    return {"success": True, "message": "Flashcard deleted successfully", "flashcard": card}
