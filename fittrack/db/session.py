"""
Database session management.

Provides the SQLModel engine and the per-request session dependency.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from fittrack.core.config import settings

DATABASE_URL: str = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, echo=settings.DEBUG, connect_args={"check_same_thread": False}, )
else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get a database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
