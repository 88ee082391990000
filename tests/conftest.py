"""Shared fixtures: a fresh SQLite database per test."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.core.database import Database
from src.main import create_app
from src.apps.blog.dependencies import get_author_service, get_post_service


@pytest.fixture
async def database(tmp_path):
    """Create an isolated database with the blog tables."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_tables()
    yield db
    await db.disconnect()


@pytest.fixture
def author_service(database):
    return get_author_service(database)


@pytest.fixture
def post_service(database):
    return get_post_service(database)


@pytest.fixture
async def client(database):
    """Create test client bound to the test database."""
    app = create_app(database)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
