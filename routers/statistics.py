from fastapi import APIRouter, Depends

from core.database import DocumentStore, get_store
from core.errors import storage_failure
from schemas.auth import TokenPayload
from schemas.statistics import Statistics
from services.statistics_service import StatisticsService
from .auth import access_token_required

router = APIRouter(prefix="/api", tags=["Statistics"])


@router.get("/statistics", response_model=Statistics)
async def get_statistics(
    payload: TokenPayload = Depends(access_token_required),
    store: DocumentStore = Depends(get_store),
):
    svc = StatisticsService(store)
    with storage_failure("Failed to fetch statistics"):
        return svc.get_statistics(payload.sub)
