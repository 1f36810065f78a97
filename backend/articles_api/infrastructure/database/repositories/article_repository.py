"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError
from articles_api.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            author_id=model.author_id,
            content=model.content,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            author_id=entity.author_id,
            content=entity.content,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def find_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def find_by_author_id(self, author_id: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.author_id == author_id)
            .order_by(ArticleModel.created_at.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, data: ArticleCreate) -> Article:
        article = Article(**data.model_dump())
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article_id: str, data: ArticleUpdate) -> Article:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            raise EntityNotFoundError("Article", article_id)
        article = self._to_entity(model)
        article.update(**data.model_dump(exclude_unset=True))
        model.title = article.title
        model.author_id = article.author_id
        model.content = article.content
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: str) -> None:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            raise EntityNotFoundError("Article", article_id)
        await self._session.delete(model)
        await self._session.flush()


def _as_utc(value: datetime) -> datetime:
    """SQLite drops the offset of timezone-aware columns; stored values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
