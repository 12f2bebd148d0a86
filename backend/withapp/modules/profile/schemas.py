# withapp/modules/profile/schemas.py
from pydantic import BaseModel, ConfigDict
from datetime import datetime


# ── Profil de la session ───────────────────────────────────

class ProfileOut(BaseModel):
    id: int
    email: str
    nickname: str
    affiliation: str
    is_admin: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ── Roster / candidats (sans email) ────────────────────────

class MemberOut(BaseModel):
    id: int
    nickname: str
    affiliation: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
