"""
Database utilities and engine management.

This module provides the core database engine that can be used by any layer:
- API routes
- Services
- Scripts and migrations

No dependencies on higher-level modules (api, services, agents).
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel

from config.settings import settings


def build_engine(db_url: str) -> Engine:
    """
    Create an engine for the given URL.

    Note:
        Postgres URLs are rewritten to the psycopg (v3) driver with client-side
        prepared statements disabled for PgBouncer/pooler compatibility.
        SQLite is used for local development and tests.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, connect_args={"check_same_thread": False})

    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+psycopg://", 1)

    return create_engine(
        db_url,
        connect_args={
            "prepare_threshold": None,  # Disable prepared statements for pooler compatibility
            "connect_timeout": 10,
        },
        pool_pre_ping=True,  # Verify connection before use
        pool_recycle=300,
        pool_size=5,
        max_overflow=5,
        pool_timeout=30,
    )


@lru_cache()
def get_engine() -> Engine:
    """
    Get cached database engine.

    Returns:
        SQLAlchemy engine singleton
    """
    return build_engine(settings.DATABASE_URL)


def create_tables(engine: Engine) -> None:
    """Create all SQLModel tables (local development; production uses Alembic)."""
    import models  # noqa: F401  (registers tables on SQLModel.metadata)

    SQLModel.metadata.create_all(engine)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields:
        SQLModel Session that auto-closes after request

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            ...
    """
    engine = get_engine()
    with Session(engine) as session:
        yield session
