from .article import (
    ArticleCreate,
    ArticleListResponse,
    ArticleResponse,
    ArticleSchema,
    ArticleUpdate,
    MessageResponse,
)
from .derivation import omit_fields, partial_model

__all__ = [
    "ArticleCreate",
    "ArticleListResponse",
    "ArticleResponse",
    "ArticleSchema",
    "ArticleUpdate",
    "MessageResponse",
    "omit_fields",
    "partial_model",
]
