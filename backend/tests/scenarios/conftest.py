# tests/scenarios/conftest.py
"""
Base SQLite en mémoire (aiosqlite) partagée par un test.

StaticPool : une seule connexion, sinon chaque session verrait
sa propre base ":memory:" vide.
"""
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from withapp.main import app
from withapp.core.database import Base, get_db
from withapp.modules.profile.service import ProfileService
from withapp.shared.models import Account


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def http(session_factory):
    """Client HTTP sur l'application réelle, branchée sur la base en mémoire."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seed_members(db):
    """seed_members("A", "B") → profils provisionnés, dans l'ordre."""
    profile_service = ProfileService()

    async def _seed(*nicknames):
        profiles = []
        for nickname in nicknames:
            account = Account(
                email=f"{nickname.lower()}@woowa.dev",
                hashed_password="not-used",
                signup_nickname=nickname,
            )
            db.add(account)
            await db.commit()
            await db.refresh(account)
            profiles.append(await profile_service.ensure_profile(db, account, nickname))
        return profiles

    return _seed
