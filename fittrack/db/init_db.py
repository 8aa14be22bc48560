"""
Database initialization.

Creates all tables directly from the SQLModel metadata (local runs and
SQLite); deployed databases are managed with Alembic.
"""

import logging

from sqlmodel import SQLModel

from fittrack.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    # Import all models so SQLModel.metadata has them
    import fittrack.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", sorted(SQLModel.metadata.tables))


if __name__ == "__main__":
    init_db()
