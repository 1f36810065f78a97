"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from articles_api.application.schemas.derivation import omit_fields, partial_model

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class ArticleSchema(BaseModel):
    """Canonical article shape, as stored and returned to the client."""

    id: str = Field(..., description="Server-assigned identifier")
    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    author_id: str = Field(..., min_length=1, max_length=255, examples=["u1"])
    content: str | None = Field(None, examples=["This is the body of the article."])
    created_at: datetime
    updated_at: datetime

    model_config = _CAMEL_CONFIG


SERVER_MANAGED_FIELDS = ("id", "created_at", "updated_at")

# Schema for creating a new article — the record shape minus server-managed fields.
ArticleCreate = omit_fields(ArticleSchema, *SERVER_MANAGED_FIELDS, model_name="ArticleCreate")

# Schema for updating an existing article — any subset of the creation fields.
ArticleUpdate = partial_model(ArticleCreate, model_name="ArticleUpdate")


class ArticleResponse(BaseModel):
    """Envelope for a single article."""

    article: ArticleSchema


class ArticleListResponse(BaseModel):
    """Envelope for a list of articles."""

    articles: list[ArticleSchema]


class MessageResponse(BaseModel):
    message: str
