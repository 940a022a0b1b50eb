"""Store Failures — driver errors surface as DatabaseError (503) through the real get_db.

Invariants:
    - No get_db override: requests go through DatabaseSessionManager.session()
    - A database without tables makes every query fail with an OperationalError
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

import app.infrastructure.database as db_module
from app.core.errors import DatabaseError
from app.infrastructure.database import init_db
from app.main import app
from app.models.like import Like


@pytest.fixture
async def empty_store(tmp_path):
    """Real session manager over a SQLite file that has no schema."""
    original_manager = db_module.db_manager
    app.dependency_overrides.clear()
    manager = init_db(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield manager
    await manager.dispose()
    db_module.db_manager = original_manager


@pytest.fixture
async def empty_store_client(empty_store):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_session_maps_driver_error_to_database_error(empty_store):
    with pytest.raises(DatabaseError) as exc:
        async with empty_store.session() as db:
            await db.execute(select(Like))
    assert exc.value.http_status == 503
    assert exc.value.operation == "execute"


async def test_check_liked_on_broken_store_is_503(empty_store_client, auth_headers):
    res = await empty_store_client.get(
        "/check-liked",
        params={"id": "5f0c1b9e-8d6a-4c1e-9a53-3b1f2a7c4d10", "email": "fan@x.io"},
        headers=auth_headers("fan@x.io"),
    )

    assert res.status_code == 503
    body = res.json()
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert body["message"].startswith("Database execute failed")


async def test_readiness_on_broken_engine_still_answers(empty_store_client):
    # SELECT 1 needs no tables: readiness only checks connectivity
    res = await empty_store_client.get("/health/ready")
    assert res.status_code == 200
