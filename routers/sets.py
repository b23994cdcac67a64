from fastapi import APIRouter, Depends

from core.database import DocumentStore, get_store
from core.errors import storage_failure
from schemas.auth import TokenPayload
from schemas.study_set import SetCreateIn, SetUpdateIn
from services.set_service import SetService
from .auth import access_token_required

router = APIRouter(prefix="/api/sets", tags=["Sets"])


@router.post("")
async def create_set(
    data: SetCreateIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = SetService(store)
    with storage_failure("Failed to create set"):
        study_set = svc.save_set(owner=payload.sub, data=data)
    return {"set": study_set}


@router.get("")
async def list_sets(
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = SetService(store)
    with storage_failure("Failed to fetch sets"):
        sets = svc.list_sets(payload.sub)
    return {"sets": sets}


@router.put("/{set_id}")
async def update_set(
    set_id: str,
    data: SetUpdateIn,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = SetService(store)
    with storage_failure("Failed to update set"):
        study_set = svc.update_set(owner=payload.sub, set_id=set_id, data=data)
    return {"set": study_set}


@router.delete("/{set_id}")
async def delete_set(
    set_id: str,
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = SetService(store)
    with storage_failure("Failed to delete set"):
        study_set = svc.delete_set(owner=payload.sub, set_id=set_id)
    return {"success": True, "set": study_set}
