# modules/notification/router.py
"""
Fil de notifications du membre connecté.
Un membre ne lit et ne modifie que ses propres notifications.
"""
from fastapi import APIRouter
from typing import List

from withapp.shared.deps import DbDep, MemberDep
from withapp.modules.notification.service import NotificationService
from withapp.modules.notification.schemas import (
    NotificationOut,
    UnreadCountOut,
    MarkAllReadOut,
)

router = APIRouter(prefix="/notifications", tags=["Notifications"])
service = NotificationService()


@router.get("", response_model=List[NotificationOut])
async def get_notifications(db: DbDep, member: MemberDep):
    return await service.get_notifications(db, member.id)


@router.get("/unread-count", response_model=UnreadCountOut, summary="Badge non lus")
async def get_unread_count(db: DbDep, member: MemberDep):
    return {"count": await service.get_unread_count(db, member.id)}


@router.post("/read-all", response_model=MarkAllReadOut)
async def mark_all_as_read(db: DbDep, member: MemberDep):
    return {"updated": await service.mark_all_as_read(db, member.id)}


@router.post("/{notification_id}/read", response_model=NotificationOut)
async def mark_as_read(notification_id: int, db: DbDep, member: MemberDep):
    return await service.mark_as_read(db, notification_id, member.id)
