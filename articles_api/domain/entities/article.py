"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Article:
    """Core domain entity representing a published article.

    Articles are immutable once stored: there is no update or delete path.
    """

    author: str
    title: str
    body: str
    id: int | None = None
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
