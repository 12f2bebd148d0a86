# modules/notification/repository.py
"""
Accès DB pour le fil de notifications.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func
from typing import List, Optional, Dict

from withapp.shared.models import Notification


class NotificationRepository:

    async def create(self, db: AsyncSession, data: Dict) -> Notification:
        db_obj = Notification(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get(self, db: AsyncSession, notification_id: int) -> Optional[Notification]:
        r = await db.execute(select(Notification).where(Notification.id == notification_id))
        return r.scalar_one_or_none()

    async def list_for_recipient(
        self, db: AsyncSession, recipient_id: int
    ) -> List[Notification]:
        r = await db.execute(
            select(Notification)
            .where(Notification.recipient_id == recipient_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        return r.scalars().all()

    async def count_unread(self, db: AsyncSession, recipient_id: int) -> int:
        r = await db.execute(
            select(func.count(Notification.id)).where(
                Notification.recipient_id == recipient_id,
                Notification.is_read == False,
            )
        )
        return r.scalar_one()

    async def mark_all_read(self, db: AsyncSession, recipient_id: int) -> int:
        """Retourne le nombre de notifications passées à lu."""
        r = await db.execute(
            update(Notification)
            .where(
                Notification.recipient_id == recipient_id,
                Notification.is_read == False,
            )
            .values(is_read=True)
        )
        await db.commit()
        return r.rowcount

    async def mark_read(self, db: AsyncSession, notification: Notification) -> Notification:
        notification.is_read = True
        await db.commit()
        await db.refresh(notification)
        return notification
