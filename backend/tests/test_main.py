# tests/test_main.py
"""
Tests HTTP transverses : santé et traduction des erreurs.

Couverture :
    GET /health                       → 200
    Store injoignable (OperationalError) → 503 SERVICE_UNAVAILABLE
    Pool épuisé (TimeoutError)          → 503 SERVICE_UNAVAILABLE
"""
import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError, TimeoutError as PoolTimeoutError

pytestmark = pytest.mark.router


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_store_injoignable_503(member_client, mocker):
    mocker.patch(
        "withapp.modules.question.router.service.list_questions",
        AsyncMock(side_effect=OperationalError("select", {}, Exception("connection refused"))),
    )
    resp = await member_client.get("/questions")
    assert resp.status_code == 503
    assert resp.json()["code"] == "SERVICE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_pool_epuise_503(member_client, mocker):
    mocker.patch(
        "withapp.modules.question.router.service.list_questions",
        AsyncMock(side_effect=PoolTimeoutError("QueuePool limit of size 15 overflow 0 reached")),
    )
    resp = await member_client.get("/questions")
    assert resp.status_code == 503
    assert resp.json()["code"] == "SERVICE_UNAVAILABLE"
