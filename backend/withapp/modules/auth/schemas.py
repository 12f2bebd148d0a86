# withapp/modules/auth/schemas.py
from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional

from withapp.modules.profile.schemas import ProfileOut


# ── Inscription / connexion ───────────────────────────────
# Longueur du mot de passe et pseudo vide : vérifiés dans AuthService
# pour renvoyer un code d'erreur dédié (WEAK_PASSWORD, EMPTY_NICKNAME).
# Emails normalisés en minuscules : un seul compte par adresse.

class SignUpIn(BaseModel):
    email:    EmailStr
    password: str
    nickname: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class SignInIn(BaseModel):
    email:    EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


# ── Tokens ───────────────────────────────────────────────

class TokenOut(BaseModel):
    access_token:  str
    refresh_token: str
    token_type:    str = "bearer"
    account_id:    int
    profile:       Optional[ProfileOut] = None   # None si le provisionnement a échoué


class RefreshIn(BaseModel):
    refresh_token: str


class AccessTokenOut(BaseModel):
    access_token: str
    token_type:   str = "bearer"
