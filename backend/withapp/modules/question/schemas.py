# withapp/modules/question/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from withapp.shared.enums import MoveDirection


class QuestionOut(BaseModel):
    id: int
    content: str
    is_active: bool
    order_index: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


# ── Administration ─────────────────────────────────────────

class QuestionCreateIn(BaseModel):
    content: str = Field(..., max_length=200)
    order_index: Optional[int] = Field(None, ge=0, description="Par défaut : après la dernière")


class QuestionUpdateIn(BaseModel):
    content: Optional[str] = Field(None, max_length=200)
    order_index: Optional[int] = Field(None, ge=0)


class QuestionMoveIn(BaseModel):
    direction: MoveDirection
