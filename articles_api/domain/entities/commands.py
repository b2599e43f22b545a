"""Domain write-side commands."""

from dataclasses import dataclass

from articles_api.domain.exceptions import ValidationError


@dataclass
class CreateArticleCommand:
    """Request to publish a new article."""

    author: str
    title: str
    body: str

    def validate(self) -> None:
        """Raise ``ValidationError`` for the first empty field (author, title, body)."""
        for name in ("author", "title", "body"):
            if getattr(self, name) == "":
                raise ValidationError(name)
