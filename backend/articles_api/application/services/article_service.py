"""Application service (use case) for Article operations."""

import logging

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.find_by_id(article_id)
        if article is None:
            logger.debug("Article '%s' not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, author_id: str | None = None) -> list[Article]:
        """List all articles, or only those of ``author_id`` when one is given."""
        if author_id:
            return await self._repository.find_by_author_id(author_id)
        return await self._repository.find_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        article = await self._repository.create(data)
        logger.info("Created article '%s' (author=%s)", article.id, article.author_id)
        return article

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        # Existence is checked first so a missing record never reaches update().
        await self.get_article(article_id)
        article = await self._repository.update(article_id, data)
        logger.info(
            "Updated article '%s' fields=%s",
            article_id,
            sorted(data.model_dump(exclude_unset=True)),
        )
        return article

    async def delete_article(self, article_id: str) -> None:
        await self.get_article(article_id)
        await self._repository.delete(article_id)
        logger.info("Deleted article '%s'", article_id)
