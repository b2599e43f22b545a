"""Article endpoints — create and list."""

from fastapi import APIRouter, Depends, Query, status

from articles_api.application.schemas import ArticleCreate, ArticleResponse, ErrorResponse
from articles_api.application.services import ArticleService
from articles_api.domain.entities import ArticleQuery
from articles_api.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article. Validation and store errors are rendered by the app's error handlers."""
    article = await service.create_article(data.to_command())
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get(
    "",
    response_model=list[ArticleResponse],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_articles(
    query: str = Query("", description="Case-insensitive substring of title or body"),
    author: str = Query("", description="Case-insensitive exact author"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve articles, newest first."""
    articles = await service.get_articles(ArticleQuery(query=query, author=author))
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
