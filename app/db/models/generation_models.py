# /app/db/models/generation_models.py

from sqlalchemy import Column, DateTime, Integer, String, Text

from ..base_class import Base


class Generation(Base):
    # Rows are append-only: nothing in the application updates or deletes them.
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    prompt = Column(Text, nullable=False)
    language = Column(String(64), nullable=False, index=True)
    code = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
