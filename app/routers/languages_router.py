# /app/routers/languages_router.py

from fastapi import APIRouter

from ..models.language_model import LanguagesResponse
from ..services import language_service

router = APIRouter()


@router.get(
    "",  # Maps to /api/languages
    response_model=LanguagesResponse,
    summary="List Supported Languages",
    description="Retrieves the programming languages code can be generated for, in display order.",
)
def get_supported_languages():
    return {"data": language_service.list_languages()}
