"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article, ArticleQuery
from articles_api.domain.exceptions import StoreError
from articles_api.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "/"


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            author=model.author,
            title=model.title,
            body=model.body,
            created=_as_utc(model.created),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            author=entity.author,
            title=entity.title,
            body=entity.body,
            created=entity.created,
        )

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        try:
            await self._session.flush()
            # The row is durable before the handler returns
            await self._session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Insert into articles failed")
            raise StoreError("create article") from exc
        article.id = model.id
        return article

    async def get_all(self, query: ArticleQuery) -> list[Article]:
        stmt = build_list_statement(query)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception("Select from articles failed")
            raise StoreError("retrieve articles") from exc
        return [self._to_entity(row) for row in result.scalars().all()]


def build_list_statement(query: ArticleQuery) -> Select:
    """Build the filtered, newest-first SELECT for ``query``.

    Both sides of every comparison are lowercased, so matching does not
    depend on the database's LIKE collation.
    """
    stmt = select(ArticleModel)

    if query.query:
        pattern = _contains_pattern(query.query)
        stmt = stmt.where(
            or_(
                func.lower(ArticleModel.title).like(pattern, escape=_LIKE_ESCAPE),
                func.lower(ArticleModel.body).like(pattern, escape=_LIKE_ESCAPE),
            )
        )

    if query.author:
        stmt = stmt.where(func.lower(ArticleModel.author) == query.author.lower())

    return stmt.order_by(ArticleModel.created.desc())


def _contains_pattern(value: str) -> str:
    """Lowercased ``%value%`` with LIKE wildcards in ``value`` escaped."""
    escaped = (
        value.lower()
        .replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _as_utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
