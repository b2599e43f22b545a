"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from articles_api.domain.entities import CreateArticleCommand


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Missing fields bind to an empty string so that the domain validator,
    not the schema, reports which field is required.
    """

    author: str = Field("", examples=["John Doe"])
    title: str = Field("", examples=["Hello World"])
    body: str = Field("", examples=["This is the article body."])

    def to_command(self) -> CreateArticleCommand:
        return CreateArticleCommand(author=self.author, title=self.title, body=self.body)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    author: str
    title: str
    body: str
    created: datetime

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """Envelope used for every error response."""

    error: str
