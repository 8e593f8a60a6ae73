# /app/models/generation_model.py

from datetime import datetime, timezone
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GenerationRecord(BaseModel):
    """
    The data contract for one stored generation. Built straight from the
    SQLAlchemy row; the timestamp is exposed to clients as `createdAt`.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    prompt: str
    language: str
    code: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; every stored timestamp is UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class GenerateRequest(BaseModel):
    """
    Body of POST /api/generate. Only presence and type are checked here;
    the content rules (trimmed, length-bounded) live in generation_service
    so every caller gets the same messages.
    """
    prompt: str
    language: str


class GenerationResponse(BaseModel):
    data: GenerationRecord


class PaginationMeta(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int
    hasNextPage: bool
    hasPreviousPage: bool


class HistoryPage(BaseModel):
    generations: List[GenerationRecord]
    pagination: PaginationMeta


class HistoryResponse(BaseModel):
    """Defines the data contract for the GET /api/history response."""
    data: HistoryPage
