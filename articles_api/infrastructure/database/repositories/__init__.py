from .article_repository import SQLAlchemyArticleRepository, build_list_statement

__all__ = [
    "SQLAlchemyArticleRepository",
    "build_list_statement",
]
