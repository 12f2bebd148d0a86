# modules/notification/service.py
"""
Fil de notifications par destinataire.

is_read est monotone (False → True) : aucune opération ne le repasse à False.
mark_all_as_read() est idempotent, un second appel ne modifie rien.
"""
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Optional

from withapp.infra.realtime import change_feed
from withapp.modules.notification.repository import NotificationRepository
from withapp.shared.enums import ChangeAction, NotificationType
from withapp.shared.errors import NotFound
from withapp.shared.models import Notification

logger = logging.getLogger(__name__)

notification_repo = NotificationRepository()

VOTE_MESSAGE_TEMPLATE = 'Quelqu\'un a voté pour toi : "{question}"'


class NotificationService:

    # ── Lecture ───────────────────────────────────────────────

    async def get_notifications(self, db: AsyncSession, recipient_id: int) -> List[Notification]:
        """Plus récentes d'abord."""
        return await notification_repo.list_for_recipient(db, recipient_id)

    async def get_unread_count(self, db: AsyncSession, recipient_id: int) -> int:
        return await notification_repo.count_unread(db, recipient_id)

    # ── Lu / non lu ───────────────────────────────────────────

    async def mark_all_as_read(self, db: AsyncSession, recipient_id: int) -> int:
        updated = await notification_repo.mark_all_read(db, recipient_id)
        if updated:
            change_feed.publish("notifications", ChangeAction.UPDATE)
        return updated

    async def mark_as_read(
        self, db: AsyncSession, notification_id: int, recipient_id: int
    ) -> Notification:
        notification = await notification_repo.get(db, notification_id)
        # Une notification d'un autre membre est traitée comme inexistante
        if not notification or notification.recipient_id != recipient_id:
            raise NotFound("NOTIFICATION_NOT_FOUND", "Notification introuvable.")
        if notification.is_read:
            return notification

        notification = await notification_repo.mark_read(db, notification)
        change_feed.publish("notifications", ChangeAction.UPDATE)
        return notification

    # ── Création ──────────────────────────────────────────────

    async def create_notification(
        self,
        db: AsyncSession,
        recipient_id: int,
        type: NotificationType,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Notification:
        notification = await notification_repo.create(db, {
            "recipient_id": recipient_id,
            "type":         NotificationType(type).value,
            "message":      message,
            "is_read":      False,
            "meta":         metadata or {},
        })
        change_feed.publish("notifications", ChangeAction.INSERT)
        return notification

    async def notify_vote(self, db: AsyncSession, vote) -> Notification:
        """Une notification "vote" pour le candidat, sans révéler le votant."""
        return await self.create_notification(
            db,
            recipient_id=vote.candidate_id,
            type=NotificationType.VOTE,
            message=VOTE_MESSAGE_TEMPLATE.format(question=vote.question_content),
            metadata={"vote_id": vote.id, "question_id": vote.question_id},
        )
