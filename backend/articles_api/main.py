"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles_api.config import get_settings
from articles_api.infrastructure.database import Base, engine
from articles_api.infrastructure.logging.log_config import setup_logging
from articles_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _maintenance_target(database_url: str) -> tuple[str, str] | None:
    """Return ``(db_name, maintenance_url)`` for a PostgreSQL URL, else None.

    The maintenance URL points at the default ``postgres`` database and keeps
    the credentials, host and query string (e.g. ``sslmode``) of the original.
    """
    if not database_url.startswith("postgresql://"):
        return None
    parsed = urlparse(database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return None
    return db_name, urlunparse(parsed._replace(path="/postgres"))


async def _ensure_database_exists(database_url: str) -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the maintenance database, checks for the target database
    name, and issues ``CREATE DATABASE`` when missing. Non-PostgreSQL URLs
    are left alone.
    """
    target = _maintenance_target(database_url)
    if target is None:
        return
    db_name, maintenance_url = target

    import asyncpg

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    setup_logging()

    await _ensure_database_exists(get_settings().database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "articles_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
