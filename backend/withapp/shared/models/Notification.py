# withapp/shared/models/Notification.py
"""
Notification "tu as été choisi·e" (et autres types système).

is_read passe de False à True, jamais l'inverse.
Pas de suppression.

`type` reste une colonne texte : la conversion vers NotificationType
(avec repli OTHER) se fait à la frontière, dans les schemas.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON, ForeignKey, Index
from sqlalchemy.sql import func

from withapp.core.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id           = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    type         = Column(String, nullable=False)
    message      = Column(String, nullable=False)
    is_read      = Column(Boolean, default=False, nullable=False)

    # "metadata" est réservé par la déclarative SQLAlchemy
    meta = Column("metadata", JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("ix_notifications_recipient_unread", "recipient_id", "is_read"),
    )

    def __repr__(self):
        return f"<Notification id={self.id} recipient={self.recipient_id} read={self.is_read}>"
