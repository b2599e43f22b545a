"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import Article, ArticleQuery


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID.

        ``created`` is stored exactly as given; the store does not stamp it.
        """
        ...

    @abstractmethod
    async def get_all(self, query: ArticleQuery) -> list[Article]:
        """Return articles matching ``query``, most recently created first.

        * ``query.query`` — lowercased title OR body contains it as a substring.
        * ``query.author`` — lowercased author equals it.
        * Both filters are ANDed; empty filters are ignored.
        * Pattern characters (``%``, ``_``) in either filter match literally.
        """
        ...
