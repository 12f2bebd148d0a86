# tests/modules/profile/test_router.py
"""
Tests HTTP pour modules.profile.router

Couverture :
    GET /profiles/me          sans session → 200 null
    GET /profiles/me          avec session → ProfileOut
    GET /profiles             → roster sans email
    GET /profiles/candidates  → service appelé avec le membre courant
"""
import pytest
from unittest.mock import AsyncMock

from tests.conftest import make_profile

pytestmark = pytest.mark.router


@pytest.mark.asyncio
async def test_me_sans_session_renvoie_null(client):
    resp = await client.get("/profiles/me")
    assert resp.status_code == 200
    assert resp.json() is None


@pytest.mark.asyncio
async def test_me_avec_session(member_client, mocker):
    mocker.patch(
        "withapp.modules.profile.router.service.get_profile",
        AsyncMock(return_value=make_profile()),
    )
    resp = await member_client.get("/profiles/me")
    assert resp.status_code == 200
    assert resp.json()["email"] == "member@woowa.dev"


@pytest.mark.asyncio
async def test_roster_sans_email(member_client, mocker):
    mocker.patch(
        "withapp.modules.profile.router.service.get_all_profiles",
        AsyncMock(return_value=[make_profile(), make_profile(id=2, nickname="b")]),
    )
    resp = await member_client.get("/profiles")
    assert resp.status_code == 200
    data = resp.json()
    assert [m["nickname"] for m in data] == ["member", "b"]
    assert "email" not in data[0]


@pytest.mark.asyncio
async def test_roster_sans_auth(client):
    resp = await client.get("/profiles")
    assert resp.status_code in (401, 403)


@pytest.mark.asyncio
async def test_candidats(member_client, mocker):
    mock = mocker.patch(
        "withapp.modules.profile.router.service.get_candidates",
        AsyncMock(return_value=[make_profile(id=2, nickname="b")]),
    )
    resp = await member_client.get("/profiles/candidates")
    assert resp.status_code == 200
    assert resp.json()[0]["id"] == 2
    assert mock.call_args.args[1].id == 1
