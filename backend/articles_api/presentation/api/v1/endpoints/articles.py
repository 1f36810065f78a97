"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from articles_api.application.schemas import (
    ArticleCreate,
    ArticleListResponse,
    ArticleResponse,
    ArticleSchema,
    ArticleUpdate,
    MessageResponse,
)
from articles_api.application.services import ArticleService
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError
from articles_api.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

_NOT_FOUND_RESPONSE = {
    404: {
        "description": "Article not found",
        "content": {"text/plain": {"example": "Article not found"}},
    },
}


def _not_found(error: EntityNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(error.public_message, status_code=404)


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse(article=ArticleSchema.model_validate(article))


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    description="Get article by id",
    responses=_NOT_FOUND_RESPONSE,
)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse | PlainTextResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        return _not_found(e)
    return _to_response(article)


@router.get(
    "",
    response_model=ArticleListResponse,
    description="Get articles with optional author query",
)
async def list_articles(
    author_id: str | None = Query(None, alias="authorId", description="Filter by author ID"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Retrieve all articles, optionally restricted to one author."""
    articles = await service.list_articles(author_id=author_id)
    return ArticleListResponse(
        articles=[ArticleSchema.model_validate(a) for a in articles]
    )


@router.post(
    "",
    response_model=ArticleResponse,
    description="Create article",
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return _to_response(article)


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    description="Update article",
    responses=_NOT_FOUND_RESPONSE,
)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse | PlainTextResponse:
    """Update an existing article. Fields left out of the body are unchanged."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        return _not_found(e)
    return _to_response(article)


@router.delete(
    "/{article_id}",
    response_model=MessageResponse,
    description="Delete article",
    responses=_NOT_FOUND_RESPONSE,
)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse | PlainTextResponse:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        return _not_found(e)
    return MessageResponse(message="Article deleted successfully")
