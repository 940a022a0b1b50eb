"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness check sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection, so
      rows committed by a route are visible to assertions on test_db
    - Auth via explicit Cookie header: no dependence on cookie-jar domain rules
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.core.auth_token import issue_token
from app.core.domain_types import TOKEN_COOKIE_NAME
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.artifact import Artifact
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def auth_headers():
    """Build a Cookie header carrying a freshly signed token for `email`."""
    def _headers(email: str) -> dict:
        token = issue_token(email, get_settings().access_token_secret)
        return {"Cookie": f"{TOKEN_COOKIE_NAME}={token}"}
    return _headers


@pytest.fixture
def make_artifact(test_db):
    """Insert an artifact directly into the test DB."""
    async def _make(
        name: str = "Rosetta Stone",
        author_email: str = "owner@example.com",
        liked_count: int = 0,
        **details,
    ) -> Artifact:
        artifact = Artifact(
            name=name, author_email=author_email,
            liked_count=liked_count, details=details,
        )
        test_db.add(artifact)
        await test_db.commit()
        await test_db.refresh(artifact)
        return artifact
    return _make
