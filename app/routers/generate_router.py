# /app/routers/generate_router.py

from fastapi import APIRouter, Depends, status

from ..models import generation_model
from ..models.error_model import ErrorListResponse, ErrorResponse
from ..services import generation_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.gemini_service import CodeProvider, get_code_provider

router = APIRouter()


@router.post(
    "",  # Maps to /api/generate
    response_model=generation_model.GenerationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Code",
    description="Generates source code for a natural-language prompt in the chosen language and stores it in the history.",
    responses={
        400: {"model": ErrorListResponse, "description": "Invalid prompt or language"},
        502: {"model": ErrorResponse, "description": "The AI provider failed"},
        504: {"model": ErrorResponse, "description": "The AI provider timed out"},
    },
)
async def generate_code(
    request: generation_model.GenerateRequest,
    db: DatabaseService = Depends(get_db_service),
    provider: CodeProvider = Depends(get_code_provider),
):
    # ValidationError / GenerationError / StoreError are turned into
    # error responses by the handlers registered in main.py.
    record = await generation_service.generate(
        db=db,
        provider=provider,
        prompt=request.prompt,
        language=request.language,
    )
    return {"data": record}
