# withapp/modules/board/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from withapp.shared.enums import BoardPostType


class BoardPostCreateIn(BaseModel):
    # Texte libre : un type non supporté est une erreur métier (INVALID_POST_TYPE)
    type: str
    content: str = Field(..., max_length=1000)


class BoardPostOut(BaseModel):
    id: int
    author_id: int
    author_nickname: str
    type: BoardPostType             # valeur inconnue en base → OTHER
    content: str
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
