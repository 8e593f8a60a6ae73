# /app/services/history_service.py

from typing import Optional

from ..models.generation_model import GenerationRecord, HistoryPage, PaginationMeta
from .database_service import DatabaseService
from .pagination import DEFAULT_PAGE_SIZE, PageRequest, build_pagination


def get_history_page(
    db: DatabaseService,
    page: int = 1,
    page_size: Optional[int] = None,
) -> HistoryPage:
    """
    Retrieves one page of the generation history, newest first.
    A page past the end is not an error: it comes back empty with the true totals.
    """
    request = PageRequest(page=page, page_size=page_size or DEFAULT_PAGE_SIZE)

    total_items = db.count_generations()
    if request.offset >= total_items:
        # Past the end: no slice query, which also keeps huge offsets away from the driver.
        records = []
    else:
        records = db.get_generations_page(offset=request.offset, limit=request.limit)

    return HistoryPage(
        generations=[GenerationRecord.model_validate(record) for record in records],
        pagination=PaginationMeta(**build_pagination(request.page, request.page_size, total_items)),
    )
