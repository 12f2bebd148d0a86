# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Trois couches :
    1. Service : mocks AsyncSession + repos via pytest-mock
    2. Router : httpx.AsyncClient + dependency_overrides FastAPI
    3. Scenario : vraie base SQLite en mémoire (aiosqlite), voir tests/scenarios
"""
import os

# Avant tout import de withapp : Settings() exige ces variables
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from types import SimpleNamespace
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from withapp.main import app
from withapp.core.database import get_db
from withapp.shared.deps import (
    get_current_account, get_optional_account, get_current_member, get_current_admin,
)


# ── Factories de modèles ORM (SimpleNamespace, léger, sans ORM) ──────────────

def make_account(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "email": "member@woowa.dev",
        "hashed_password": "hashed_password",
        "signup_nickname": "member",
        "is_active": True,
        "created_at": datetime(2025, 1, 1),
        "updated_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_profile(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "account_id": 1,
        "email": "member@woowa.dev",
        "nickname": "member",
        "affiliation": "with",
        "is_admin": False,
        "created_at": datetime(2025, 1, 1),
        "updated_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_question(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "content": "Qui te fait le plus rire ?",
        "is_active": False,
        "order_index": 0,
        "created_at": datetime(2025, 1, 1),
        "updated_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_vote(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "voter_id": 1,
        "candidate_id": 2,
        "question_id": 1,
        "question_content": "Qui te fait le plus rire ?",
        "vote_date": date(2025, 3, 10),
        "created_at": datetime(2025, 3, 10, 9, 30),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_notification(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "recipient_id": 2,
        "type": "vote",
        "message": 'Quelqu\'un a voté pour toi : "Qui te fait le plus rire ?"',
        "is_read": False,
        "meta": {"vote_id": 1, "question_id": 1},
        "created_at": datetime(2025, 3, 10, 9, 30),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_board_post(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "author_id": 1,
        "author_nickname": "member",
        "type": "question",
        "content": "Avec qui partagerais-tu un dessert ?",
        "created_at": datetime(2025, 3, 10, 12, 0),
        "updated_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


# ── DB mock factory ───────────────────────────────────────────────────────────

def make_async_db() -> AsyncMock:
    """
    AsyncMock simulant une AsyncSession SQLAlchemy.
    Fournit une side_effect sur refresh() pour simuler le SET d'ID par le DB.
    """
    db = AsyncMock(spec=AsyncSession)
    db.add = MagicMock()

    async def refresh_side_effect(obj):
        if not getattr(obj, "id", None):
            try:
                obj.id = 1
            except (AttributeError, TypeError):
                pass

    db.refresh = AsyncMock(side_effect=refresh_side_effect)
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.close = AsyncMock()

    return db


def scalar_result(value) -> MagicMock:
    """Résultat de db.execute() dont scalar_one_or_none() renvoie `value`."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


# ── Fixtures HTTP (httpx.AsyncClient + dependency_overrides) ─────────────────

@pytest.fixture
async def client():
    """Client sans auth, pour endpoints publics ou mocker le service entier."""
    mock_db = AsyncMock(spec=AsyncSession)
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def member_client():
    """Client authentifié comme membre (Profile non admin)."""
    mock_db = AsyncMock(spec=AsyncSession)
    mock_account = make_account()
    mock_profile = make_profile()
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_current_account] = lambda: mock_account
    app.dependency_overrides[get_optional_account] = lambda: mock_account
    app.dependency_overrides[get_current_member] = lambda: mock_profile
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client():
    """Client authentifié comme administrateur."""
    mock_db = AsyncMock(spec=AsyncSession)
    mock_account = make_account(id=9, email="admin@woowa.dev")
    mock_profile = make_profile(
        id=9, account_id=9, email="admin@woowa.dev", nickname="admin", is_admin=True,
    )
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_current_account] = lambda: mock_account
    app.dependency_overrides[get_optional_account] = lambda: mock_account
    app.dependency_overrides[get_current_member] = lambda: mock_profile
    app.dependency_overrides[get_current_admin] = lambda: mock_profile
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
