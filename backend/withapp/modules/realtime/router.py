# modules/realtime/router.py
"""
Abonnement WebSocket au flux de changements d'une table.

    ws://.../realtime/votes?token=<access_token>
    ← {"table": "votes", "action": "INSERT"}

Le message ne porte aucune donnée : le client relit via l'API REST.
Table inconnue ou jeton invalide → fermeture 1008 (policy violation).

Pas de DbDep : le jeton est vérifié dans une session courte, refermée
avant accept(). Aucune connexion du pool n'est tenue pendant l'abonnement.
"""
import asyncio
import contextlib
import logging
from typing import Optional
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from withapp.core.database import SessionLocal
from withapp.infra.realtime import change_feed, ChangeEvent, TABLES
from withapp.shared.deps import account_from_token
from withapp.shared.models import Account

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/realtime", tags=["Realtime"])


async def _authenticate(token: str) -> Optional[Account]:
    if not token:
        return None
    async with SessionLocal() as db:
        return await account_from_token(db, token)


async def _forward(websocket: WebSocket, queue: "asyncio.Queue[ChangeEvent]") -> None:
    while True:
        event = await queue.get()
        await websocket.send_json({"table": event.table, "action": event.action.value})


@router.websocket("/{table}")
async def subscribe(websocket: WebSocket, table: str, token: str = ""):
    if table not in TABLES:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    account = await _authenticate(token)
    if account is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    account_id = account.id

    loop = asyncio.get_running_loop()
    queue: "asyncio.Queue[ChangeEvent]" = asyncio.Queue()
    # Les publications peuvent venir d'un autre thread
    dispose = change_feed.subscribe(
        table, lambda event: loop.call_soon_threadsafe(queue.put_nowait, event)
    )
    await websocket.accept()
    logger.info("Abonnement realtime %s ouvert (compte %s)", table, account_id)

    sender = asyncio.create_task(_forward(websocket, queue))
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Abonnement realtime %s fermé (compte %s)", table, account_id)
    finally:
        dispose()
        sender.cancel()
        # Récupère aussi l'éventuelle erreur d'envoi (socket déjà fermée)
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await sender
