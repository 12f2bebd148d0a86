# withapp/modules/notification/schemas.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict
from datetime import datetime

from withapp.shared.enums import NotificationType


class NotificationOut(BaseModel):
    id: int
    recipient_id: int
    type: NotificationType          # valeur inconnue en base → OTHER
    message: str
    is_read: bool
    # Colonne "metadata", attribut ORM "meta"
    metadata: Dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("meta", "metadata")
    )
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UnreadCountOut(BaseModel):
    count: int


class MarkAllReadOut(BaseModel):
    updated: int
