# /app/models/error_model.py

from typing import List

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class ErrorListResponse(BaseModel):
    errors: List[str]
