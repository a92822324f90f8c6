from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import mongomock
import pytest
from pymongo.database import Database

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from flairfolio.config import get_settings
from flairfolio.db import close_mongo_connection, connect_to_mongo, get_db
from flairfolio.services import PortfolioService, get_portfolio_service


@pytest.fixture(autouse=True)
def _env_overrides(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/test")
    monkeypatch.setenv("MONGO_DB_NAME", "flairfolio-test")
    monkeypatch.delenv("MONGO_ALT_URI", raising=False)
    monkeypatch.delenv("MONGO_UNIQUE_INDEXES", raising=False)
    monkeypatch.delenv("DEFAULT_DATA_PATH", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def mongo_client(monkeypatch: pytest.MonkeyPatch) -> Iterator[mongomock.MongoClient]:
    client = mongomock.MongoClient()

    def _client_factory(*_args, **_kwargs) -> mongomock.MongoClient:
        return client

    monkeypatch.setattr("flairfolio.db.MongoClient", _client_factory)
    yield client
    client.close()


@pytest.fixture
def database(mongo_client: mongomock.MongoClient) -> Iterator[Database]:
    connect_to_mongo()
    yield get_db()
    close_mongo_connection()


@pytest.fixture
def service(database: Database) -> PortfolioService:
    return get_portfolio_service(database)
