"""Filter semantics of both ArticleRepository implementations.

The SQLAlchemy repository runs against SQLite (aiosqlite); the same cases
run against the in-memory repository so the two backends stay in step.
"""

from collections.abc import AsyncIterator
from datetime import timedelta

import pytest
import pytest_asyncio

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article, ArticleQuery
from articles_api.infrastructure.database import Database
from articles_api.infrastructure.database.repositories import SQLAlchemyArticleRepository
from articles_api.infrastructure.memory.article_repository import InMemoryArticleRepository


@pytest_asyncio.fixture(params=["sqlalchemy", "memory"])
async def repository(request, database: Database, sample_articles: list[Article]) -> AsyncIterator[ArticleRepository]:
    if request.param == "memory":
        repo: ArticleRepository = InMemoryArticleRepository()
        for article in sample_articles:
            await repo.create(article)
        yield repo
        return

    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        for article in sample_articles:
            await repo.create(article)
        yield repo


async def _titles(repo: ArticleRepository, **filters: str) -> list[str]:
    return [a.title for a in await repo.get_all(ArticleQuery(**filters))]


@pytest.mark.asyncio
async def test_create_assigns_ids(repository: ArticleRepository, sample_articles: list[Article]):
    ids = [a.id for a in sample_articles]
    assert all(i is not None for i in ids)
    assert len(set(ids)) == len(ids)


@pytest.mark.asyncio
async def test_no_filters_returns_all_newest_first(repository: ArticleRepository):
    assert await _titles(repository) == ["Unrelated", "Release notes", "Greetings", "Hello World"]


@pytest.mark.asyncio
async def test_created_is_stored_as_given(repository: ArticleRepository, sample_articles: list[Article]):
    articles = await repository.get_all(ArticleQuery())
    assert {a.id: a.created for a in articles} == {a.id: a.created for a in sample_articles}
    assert all(a.created.tzinfo is not None for a in articles)


@pytest.mark.asyncio
async def test_query_matches_title_or_body_case_insensitively(repository: ArticleRepository):
    assert await _titles(repository, query="WORLD") == ["Greetings", "Hello World"]
    assert await _titles(repository, query="hello") == ["Hello World"]
    assert await _titles(repository, query="ARTICLE bod") == ["Hello World"]


@pytest.mark.asyncio
async def test_query_is_a_plain_substring(repository: ArticleRepository):
    # Not anchored, not tokenized
    assert await _titles(repository, query="lo wor") == ["Hello World"]
    assert await _titles(repository, query="world hello") == []


@pytest.mark.asyncio
async def test_author_is_exact_and_case_insensitive(repository: ArticleRepository):
    assert await _titles(repository, author="JOHN DOE") == ["Release notes", "Hello World"]
    assert await _titles(repository, author="john") == []
    assert await _titles(repository, author="jane") == []


@pytest.mark.asyncio
async def test_filters_combine_with_and(repository: ArticleRepository):
    assert await _titles(repository, query="world", author="john doe") == ["Hello World"]
    assert await _titles(repository, query="greetings", author="john doe") == []


@pytest.mark.asyncio
async def test_pattern_characters_match_literally(repository: ArticleRepository):
    assert await _titles(repository, query="%") == ["Release notes"]
    assert await _titles(repository, query="e_c") == ["Release notes"]
    assert await _titles(repository, query="e%c") == []
    assert await _titles(repository, query="/") == []


@pytest.mark.asyncio
async def test_case_folding_covers_non_ascii(repository: ArticleRepository, sample_articles: list[Article]):
    await repository.create(
        Article(
            author="Ægir",
            title="Über Straße",
            body="ÄRGER",
            created=sample_articles[-1].created + timedelta(minutes=1),
        )
    )

    assert await _titles(repository, query="ärger") == ["Über Straße"]
    assert await _titles(repository, query="ÜBER") == ["Über Straße"]
    assert await _titles(repository, author="ægir") == ["Über Straße"]


@pytest.mark.asyncio
async def test_empty_store_returns_empty_list(database: Database):
    async with database.session() as session:
        assert await SQLAlchemyArticleRepository(session).get_all(ArticleQuery()) == []
    assert await InMemoryArticleRepository().get_all(ArticleQuery()) == []
