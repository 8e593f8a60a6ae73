# /app/services/database_service.py

from typing import Dict, Generator, List

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.db.models.generation_models import Generation

from .database_helpers.generation_repository_sql import GenerationRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. Services only talk to this class,
        so a test can swap the whole store for a mock in one place.
        """
        self.generation_repo = GenerationRepositorySQL(db_session)

    # --- GENERATION HISTORY METHODS (DELEGATED) ---
    def add_generation_record(self, record: Dict) -> Generation: return self.generation_repo.add_generation_record(record)
    def count_generations(self) -> int: return self.generation_repo.count_generations()
    def get_generations_page(self, offset: int, limit: int) -> List[Generation]: return self.generation_repo.get_generations_page(offset, limit)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
