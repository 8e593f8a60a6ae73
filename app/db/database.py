# /app/db/database.py

from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import DatabaseEngine, Settings, get_settings


def engine_options(engine_kind: DatabaseEngine, echo: bool = False) -> Dict[str, Any]:
    """
    Engine keyword arguments for the configured backend. The backend is an
    explicit setting and is never guessed from the connection string.
    """
    options: Dict[str, Any] = {"echo": echo}
    if engine_kind is DatabaseEngine.SQLITE:
        # The same connection is handed across FastAPI's threadpool.
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(pool_pre_ping=True, pool_size=5, max_overflow=0, pool_recycle=1800)
    return options


def build_engine(settings: Settings) -> Engine:
    return create_engine(
        settings.database_url,
        **engine_options(settings.database_engine, settings.database_echo),
    )


engine = build_engine(get_settings())

# Each instance of SessionLocal is one database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create any missing tables."""
    from .base import Base

    Base.metadata.create_all(bind=bind)


# Dependency that yields one session per request.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
