from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from moviedb import models  # noqa: F401
from moviedb.api.deps import get_db
from moviedb.core.config import Settings
from moviedb.core.db import Database
from moviedb.main import create_app

from .fixtures.factories import *

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine() -> Generator[Engine, None, None]:
    # One shared in-memory connection, dropped with the engine after each test
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(DATABASE_URL=TEST_DATABASE_URL, LOG_DIR=None, CREATE_TABLES=False)


@pytest.fixture(scope="function")
def app(test_engine: Engine, test_settings: Settings) -> FastAPI:
    return create_app(config=test_settings, database=Database(test_engine))


@pytest.fixture(scope="function")
def db_transaction(test_engine: Engine, app: FastAPI) -> Generator[Session, None, None]:
    session = Session(test_engine)

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield session
        except Exception:
            session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app: FastAPI, db_transaction: Session) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
