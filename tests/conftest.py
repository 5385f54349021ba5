from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from quiz_catalog.catalog.categories import CategoryStore
from quiz_catalog.catalog.questions import QuestionStore
from quiz_catalog.core.config import Settings
from quiz_catalog.db.session import Database
from quiz_catalog.main import create_app


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = Database(_sqlite_url(tmp_path / "catalog.db"))
    await db.open()
    await db.create_all()
    try:
        yield db
    finally:
        await db.close()


@pytest.fixture
def category_store(database: Database) -> CategoryStore:
    return CategoryStore(database)


@pytest.fixture
def question_store(database: Database) -> QuestionStore:
    return QuestionStore(database)


@pytest.fixture
def api_settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=_sqlite_url(tmp_path / "api.db"),
        DB_CREATE_SCHEMA=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(api_settings: Settings) -> Iterator[TestClient]:
    app = create_app(api_settings)
    with TestClient(app) as test_client:
        yield test_client
