"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_current_user_id overridden by `client`; `cookie_client` keeps the
      real signed-cookie resolver
    - db_manager patched so readiness checks hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import base64
import json

import itsdangerous
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from jokester.config import get_settings
from jokester.db.base import Base
from jokester.infrastructure.database import get_db, DatabaseSessionManager
from jokester.infrastructure.identity import USER_ID_SESSION_KEY, get_current_user_id
from jokester.models.joke import Joke
import jokester.infrastructure.database as db_module
from jokester.main import app


class CurrentUser:
    """Mutable identity seen by routes under the `client` fixture."""

    def __init__(self):
        self.user_id: str | None = None


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
def current_user():
    return CurrentUser()


@pytest.fixture
def override_db(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(override_db, current_user):
    """FastAPI test client; identity comes from `current_user`."""
    app.dependency_overrides[get_current_user_id] = lambda: current_user.user_id

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def cookie_client(override_db):
    """FastAPI test client that resolves identity from the session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def session_cookie():
    """Build a Cookie header the way SessionMiddleware signs sessions."""
    settings = get_settings()

    def _build(user_id: str | None, secret: str | None = None) -> dict[str, str]:
        signer = itsdangerous.TimestampSigner(secret or settings.session_secret)
        payload = {USER_ID_SESSION_KEY: user_id} if user_id is not None else {}
        data = base64.b64encode(json.dumps(payload).encode("utf-8"))
        value = signer.sign(data).decode("utf-8")
        return {"Cookie": f"{settings.session_cookie_name}={value}"}

    return _build


@pytest.fixture
async def seed_joke(test_db):
    """Insert a joke authored by 'kody' directly into the test DB."""
    joke = Joke(
        name="Road worker",
        content="I never wanted to believe that my Dad was stealing from his job "
                "as a road worker. But when I got home, all the signs were there.",
        jokester_id="kody",
    )
    test_db.add(joke)
    await test_db.commit()
    await test_db.refresh(joke)
    return joke
