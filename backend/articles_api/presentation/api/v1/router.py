"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from articles_api.presentation.api.v1.endpoints.health import router as health_router
from articles_api.presentation.api.v1.endpoints.articles import router as articles_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
