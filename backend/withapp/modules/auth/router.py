# withapp/modules/auth/router.py
"""
Pas d'endpoint de déconnexion : les jetons sont sans état,
le client les oublie.
"""
from fastapi import APIRouter
from withapp.modules.auth.schemas import (
    SignUpIn, SignInIn, TokenOut, RefreshIn, AccessTokenOut,
)
from withapp.modules.auth.service import AuthService
from withapp.shared.deps import DbDep, AccountDep

router = APIRouter(prefix="/auth", tags=["Auth"])
service = AuthService()


@router.post("/signup", response_model=TokenOut, status_code=201)
async def sign_up(payload: SignUpIn, db: DbDep):
    """Inscription → crée Account + Profile (idempotent)."""
    return await service.sign_up(db, payload)


@router.post("/signin", response_model=TokenOut)
async def sign_in(payload: SignInIn, db: DbDep):
    """Connexion → répare le Profile s'il manque."""
    return await service.sign_in(db, payload)


@router.post("/refresh", response_model=AccessTokenOut)
async def refresh(payload: RefreshIn, db: DbDep):
    return await service.refresh(db, payload.refresh_token)


@router.get("/me")
async def me(current_account: AccountDep):
    """Retourne les infos minimales du token."""
    return {
        "id": current_account.id,
        "email": current_account.email,
        "is_active": current_account.is_active,
    }
