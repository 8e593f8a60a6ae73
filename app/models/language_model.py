# /app/models/language_model.py

from typing import List

from pydantic import BaseModel, ConfigDict


class Language(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    extension: str


class LanguagesResponse(BaseModel):
    data: List[Language]
