# tests/shared/test_deps.py
"""
Tests unitaires pour shared.deps

Couverture :
    account_from_token() : access valide, refresh refusé, jeton illisible, compte inactif
    get_current_member() : pas de profil → PROFILE_REQUIRED
    get_current_admin()  : membre non admin → ADMIN_REQUIRED
"""
import pytest
from unittest.mock import AsyncMock

from withapp.core.security import create_access_token, create_refresh_token
from withapp.shared.deps import account_from_token, get_current_member, get_current_admin
from withapp.shared.errors import Forbidden
from tests.conftest import make_account, make_profile, make_async_db, scalar_result

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_access_token_valide():
    db = make_async_db()
    db.execute = AsyncMock(return_value=scalar_result(make_account()))

    account = await account_from_token(db, create_access_token({"sub": "1"}))

    assert account.id == 1


@pytest.mark.asyncio
async def test_refresh_token_refuse():
    db = make_async_db()

    assert await account_from_token(db, create_refresh_token({"sub": "1"})) is None
    db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_jeton_illisible():
    assert await account_from_token(make_async_db(), "pas.un.jeton") is None


@pytest.mark.asyncio
async def test_compte_inactif():
    db = make_async_db()
    db.execute = AsyncMock(return_value=scalar_result(make_account(is_active=False)))

    assert await account_from_token(db, create_access_token({"sub": "1"})) is None


@pytest.mark.asyncio
async def test_profil_requis():
    db = make_async_db()
    db.execute = AsyncMock(return_value=scalar_result(None))

    with pytest.raises(Forbidden) as exc_info:
        await get_current_member(make_account(), db)

    assert exc_info.value.code == "PROFILE_REQUIRED"


@pytest.mark.asyncio
async def test_admin_requis():
    with pytest.raises(Forbidden) as exc_info:
        await get_current_admin(make_profile(is_admin=False))

    assert exc_info.value.code == "ADMIN_REQUIRED"


@pytest.mark.asyncio
async def test_admin():
    admin = make_profile(is_admin=True)
    assert await get_current_admin(admin) is admin
