# /app/routers/history_router.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.config import get_settings

from ..models import generation_model
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.pagination import MAX_PAGE_SIZE

router = APIRouter()


@router.get(
    "",  # Maps to /api/history
    response_model=generation_model.HistoryResponse,
    summary="Get Generation History",
    description="Returns one page of past generations, most recent first.",
)
def get_generation_history(
    page: int = Query(1, ge=1, description="1-based page number."),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Items per page."),
    db: DatabaseService = Depends(get_db_service),
):
    page_size = limit or get_settings().history_default_page_size
    return {"data": history_service.get_history_page(db=db, page=page, page_size=page_size)}
