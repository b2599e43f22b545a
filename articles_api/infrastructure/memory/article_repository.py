"""In-process article repository, selected with ``REPOSITORY_BACKEND=memory``."""

from dataclasses import replace

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article, ArticleQuery


class InMemoryArticleRepository(ArticleRepository):
    """Keeps articles in a list for the lifetime of the application.

    Matches the relational repository: lowercased substring on title or body,
    lowercased exact author, newest first. Python's ``in`` has no wildcards,
    so user input is always literal.
    """

    def __init__(self):
        self._articles: list[Article] = []
        self._next_id = 1

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles.append(replace(article))
        return article

    async def get_all(self, query: ArticleQuery) -> list[Article]:
        needle = query.query.lower()
        author = query.author.lower()

        matches = [
            replace(a)
            for a in self._articles
            if (not needle or needle in a.title.lower() or needle in a.body.lower())
            and (not author or a.author.lower() == author)
        ]
        matches.sort(key=lambda a: a.created, reverse=True)
        return matches
