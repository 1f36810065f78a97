"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID, or None when it does not exist."""
        ...

    @abstractmethod
    async def find_by_author_id(self, author_id: str) -> list[Article]:
        """Retrieve every article written by the given author."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Retrieve every article."""
        ...

    @abstractmethod
    async def create(self, data: ArticleCreate) -> Article:
        """Persist a new article and return it with its generated ID."""
        ...

    @abstractmethod
    async def update(self, article_id: str, data: ArticleUpdate) -> Article:
        """Apply the fields set on ``data`` and return the full record.

        Raises EntityNotFoundError if the article no longer exists.
        """
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> None:
        """Delete an article. Raises EntityNotFoundError if it does not exist."""
        ...
