"""Domain read-side query objects."""

from dataclasses import dataclass


@dataclass
class ArticleQuery:
    """Filters for listing articles.

    An empty string on either field means "no constraint on this dimension";
    there is no way to search for a literal empty author.
    """

    query: str = ""  # case-insensitive substring of title or body
    author: str = ""  # case-insensitive exact author

    def validate(self) -> None:
        """Queries are always valid — absent filters match everything."""
        return None
