"""Shared fixtures: an in-memory SQLite database and articles with fixed timestamps."""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from articles_api.config import Settings
from articles_api.domain.entities import Article
from articles_api.infrastructure.database import Database


def sqlite_settings(**overrides) -> Settings:
    return Settings(_env_file=None, database_url="sqlite:///:memory:", **overrides)


@pytest_asyncio.fixture
async def database() -> AsyncIterator[Database]:
    db = Database(sqlite_settings())
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def sample_articles() -> list[Article]:
    """Four articles, oldest first, one minute apart."""
    start = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    rows = [
        ("John Doe", "Hello World", "This is the article body"),
        ("Jane Smith", "Greetings", "Welcome to the WORLD"),
        ("john doe", "Release notes", "100% coverage, snake_case names"),
        ("Johnny", "Unrelated", "Nothing here"),
    ]
    return [
        Article(author=author, title=title, body=body, created=start + timedelta(minutes=i))
        for i, (author, title, body) in enumerate(rows)
    ]
