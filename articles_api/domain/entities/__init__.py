from .article import Article
from .commands import CreateArticleCommand
from .query import ArticleQuery

__all__ = [
    "Article",
    "CreateArticleCommand",
    "ArticleQuery",
]
