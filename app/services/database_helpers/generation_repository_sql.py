# /app/services/database_helpers/generation_repository_sql.py

import logging
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreError
from app.db.models.generation_models import Generation

logger = logging.getLogger(__name__)


class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_record(self, record: Dict) -> Generation:
        """Inserts one Generation in a single commit and returns it with its new id."""
        new_generation = Generation(**record)
        try:
            self.db.add(new_generation)
            self.db.commit()
            self.db.refresh(new_generation)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to insert generation record")
            raise StoreError(f"Insert into generations failed: {e}") from e
        return new_generation

    def count_generations(self) -> int:
        try:
            return self.db.query(func.count(Generation.id)).scalar() or 0
        except SQLAlchemyError as e:
            logger.exception("Failed to count generation records")
            raise StoreError(f"Count of generations failed: {e}") from e

    def get_generations_page(self, offset: int, limit: int) -> List[Generation]:
        """Retrieves one slice of the history, most recent first."""
        try:
            return (
                self.db.query(Generation)
                .order_by(Generation.id.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to read generation records (offset=%s, limit=%s)", offset, limit)
            raise StoreError(f"Read from generations failed: {e}") from e
