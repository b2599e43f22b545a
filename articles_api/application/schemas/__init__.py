from .article import ArticleCreate, ArticleResponse, ErrorResponse

__all__ = [
    "ArticleCreate",
    "ArticleResponse",
    "ErrorResponse",
]
