"""Application service (use case) for Article operations."""

import logging
from datetime import datetime, timezone

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article, ArticleQuery, CreateArticleCommand

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def create_article(self, command: CreateArticleCommand) -> Article:
        command.validate()
        article = Article(
            author=command.author,
            title=command.title,
            body=command.body,
            created=datetime.now(timezone.utc),
        )
        article = await self._repository.create(article)
        logger.info("Created article id=%s author=%r", article.id, article.author)
        return article

    async def get_articles(self, query: ArticleQuery) -> list[Article]:
        query.validate()
        articles = await self._repository.get_all(query)
        logger.debug(
            "Listed %d articles (query=%r, author=%r)",
            len(articles),
            query.query,
            query.author,
        )
        return articles
