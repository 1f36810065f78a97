"""End-to-end article API tests against a real SQLite database.

Only the session factory is swapped for one bound to a temporary file, so the
per-request session, the SQLAlchemy repository and the serialization of rows
read back from the database all run as in production.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from articles_api.infrastructure.database import Base
from articles_api.infrastructure.database import session as db_session
from articles_api.main import app

BASE = "/api/v1/articles"


@pytest_asyncio.fixture
async def client(tmp_path, monkeypatch):
    engine = create_async_engine(
        db_session.get_async_url(f"sqlite:///{tmp_path / 'articles.db'}")
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    monkeypatch.setattr(
        db_session,
        "async_session_factory",
        async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    await engine.dispose()


@pytest.mark.asyncio
async def test_article_lifecycle_persists_across_requests(client: AsyncClient):
    response = await client.post(BASE, json={"title": "T", "authorId": "u1"})
    assert response.status_code == 200
    created = response.json()["article"]
    article_id = created["id"]

    response = await client.get(f"{BASE}/{article_id}")
    assert response.status_code == 200
    fetched = response.json()["article"]
    assert fetched == created

    response = await client.put(f"{BASE}/{article_id}", json={"title": "T2"})
    assert response.status_code == 200
    updated = response.json()["article"]
    assert updated["id"] == article_id
    assert updated["title"] == "T2"
    assert updated["authorId"] == "u1"
    assert updated["createdAt"] == created["createdAt"]

    response = await client.get(BASE, params={"authorId": "u1"})
    assert response.status_code == 200
    assert response.json()["articles"] == [updated]

    response = await client.delete(f"{BASE}/{article_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Article deleted successfully"}

    response = await client.get(f"{BASE}/{article_id}")
    assert response.status_code == 404
    assert response.text == "Article not found"


@pytest.mark.asyncio
async def test_missing_article_is_not_found_on_every_verb(client: AsyncClient):
    assert (await client.get(f"{BASE}/missing")).text == "Article not found"
    assert (await client.put(f"{BASE}/missing", json={"title": "T"})).status_code == 404
    assert (await client.delete(f"{BASE}/missing")).status_code == 404
    assert (await client.get(BASE)).json() == {"articles": []}
