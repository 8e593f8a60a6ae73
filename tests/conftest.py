# /tests/conftest.py

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.exceptions import GenerationError
from app.db.base import Base
from app.services.database_service import DatabaseService


class FakeCodeProvider:
    """
    Stands in for the Gemini provider. It returns `code`, raises `error`,
    or sleeps `delay` seconds first, and records every call it receives.
    """

    def __init__(self, code="print('hello')", error=None, delay=0.0):
        self.code = code
        self.error = error
        self.delay = delay
        self.calls = []

    async def complete(self, prompt, language):
        self.calls.append((prompt, language))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.code


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same tables.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_service(db_session):
    """A fresh DatabaseService over an empty in-memory store for each test."""
    return DatabaseService(db_session=db_session)


@pytest.fixture
def fake_provider():
    return FakeCodeProvider()


@pytest.fixture
def failing_provider():
    return FakeCodeProvider(error=GenerationError("AI provider request failed: 503 Service Unavailable"))


@pytest.fixture
def insert_generations(db_service):
    """Inserts `count` generations with strictly increasing timestamps."""
    def _insert(count, language="Python"):
        start = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        records = []
        for i in range(count):
            records.append(db_service.add_generation_record({
                "prompt": f"prompt {i + 1}",
                "language": language,
                "code": f"# solution {i + 1}",
                "created_at": start + timedelta(minutes=i),
            }))
        return records
    return _insert
