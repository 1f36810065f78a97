"""Shared test fixtures — in-memory repository and environment defaults."""

import os

# Keep the engine created at import time off any real database.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")

import pytest

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for testing. Records every call it receives."""

    def __init__(self):
        self._articles: dict[str, Article] = {}
        self.calls: list[str] = []

    async def find_by_id(self, article_id: str) -> Article | None:
        self.calls.append("find_by_id")
        return self._articles.get(article_id)

    async def find_by_author_id(self, author_id: str) -> list[Article]:
        self.calls.append("find_by_author_id")
        return [a for a in self._articles.values() if a.author_id == author_id]

    async def find_all(self) -> list[Article]:
        self.calls.append("find_all")
        return list(self._articles.values())

    async def create(self, data: ArticleCreate) -> Article:
        self.calls.append("create")
        article = Article(**data.model_dump())
        self._articles[article.id] = article
        return article

    async def update(self, article_id: str, data: ArticleUpdate) -> Article:
        self.calls.append("update")
        article = self._articles.get(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        article.update(**data.model_dump(exclude_unset=True))
        return article

    async def delete(self, article_id: str) -> None:
        self.calls.append("delete")
        if article_id not in self._articles:
            raise EntityNotFoundError("Article", article_id)
        del self._articles[article_id]


@pytest.fixture
def fake_repository() -> FakeArticleRepository:
    return FakeArticleRepository()
