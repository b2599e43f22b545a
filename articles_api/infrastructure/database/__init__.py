from .base import Base
from .session import Database
from .models import ArticleModel

__all__ = [
    "Base",
    "Database",
    "ArticleModel",
]
