from typing import Any

from fastapi import APIRouter, Body, Depends, File, Query, UploadFile
from fastapi.responses import Response

from core.database import DocumentStore, get_store
from core.errors import ValidationError, storage_failure
from schemas.auth import TokenPayload
from services.transfer_service import TransferService, export_filename
from .auth import access_token_required

router = APIRouter(prefix="/api/sets", tags=["Import/Export"])


@router.get("/{set_id}/export")
async def export_set(
    set_id: str,
    format: str = Query("json", description="json or csv"),
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = TransferService(store)
    with storage_failure("Failed to export set"):
        study_set, exported = svc.export_set(owner=payload.sub, set_id=set_id, fmt=format)

    if isinstance(exported, str):
        filename = export_filename(study_set.name, study_set.id, "csv")
        return Response(
            content=exported.encode("utf-8"),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
    return exported


def _import_result(study_set, cards) -> dict:
    return {
        "success": True,
        "set": study_set,
        "flashcards": cards,
        "flashcardsCount": len(cards),
    }


@router.post("/import")
async def import_set(
    data: Any = Body(None),
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = TransferService(store)
    with storage_failure("Failed to import set"):
        study_set, cards = svc.import_set(owner=payload.sub, payload=data)
    return _import_result(study_set, cards)


@router.post("/import/csv")
async def import_set_csv(
    file: UploadFile = File(...),
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    filename = (file.filename or "").lower()
    if not filename.endswith(".csv"):
        raise ValidationError("Only CSV files can be imported.")

    raw_bytes = await file.read()
    try:
        text = raw_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValidationError("CSV must be UTF-8 encoded.") from exc

    svc = TransferService(store)
    with storage_failure("Failed to import set"):
        study_set, cards = svc.import_csv(owner=payload.sub, text=text)
    return _import_result(study_set, cards)
