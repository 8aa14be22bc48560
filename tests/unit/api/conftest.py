"""Fixtures for service and API tests: in-memory SQLite and a TestClient."""

import os
import random

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import fittrack.db.base  # noqa: F401
from fittrack.api.dependencies import get_rng
from fittrack.db.session import get_db
from fittrack.main import app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_rng] = lambda: random.Random(42)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
