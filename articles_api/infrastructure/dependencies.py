"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.services import ArticleService
from articles_api.config import Settings
from articles_api.infrastructure.database.repositories import SQLAlchemyArticleRepository


def get_app_settings(request: Request) -> Settings:
    """The Settings the running application was created with."""
    return request.app.state.settings


async def get_article_repository(request: Request) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the configured repository; relational repositories get a per-request session."""
    state = request.app.state
    if state.settings.repository_backend == "memory":
        yield state.article_repository
        return

    async with state.database.session() as session:
        yield SQLAlchemyArticleRepository(session)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
