# withapp/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends(), jamais appelées directement.

Le "contexte courant" (compte, profil) est résolu ici à chaque requête
puis passé explicitement aux services : aucun état global de session.
"""
from typing import Annotated, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from withapp.core.database import get_db
from withapp.core.security import decode_token
from withapp.shared.errors import Unauthorized, Forbidden
from withapp.shared.models import Account, Profile

bearer = HTTPBearer()
optional_bearer = HTTPBearer(auto_error=False)


async def account_from_token(db: AsyncSession, token: str) -> Optional[Account]:
    """Compte actif correspondant à un access token, None sinon."""
    try:
        payload = decode_token(token)
        if payload.get("type") != "access":
            return None
        account_id = int(payload["sub"])
    except (JWTError, KeyError, ValueError):
        return None

    result = await db.execute(select(Account).where(Account.id == account_id))
    account = result.scalar_one_or_none()
    if not account or not account.is_active:
        return None
    return account


async def _get_account_from_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Account:
    account = await account_from_token(db, credentials.credentials)
    if account is None:
        raise Unauthorized("INVALID_TOKEN", "Jeton invalide ou expiré.")
    return account


# ── Deps publiques ─────────────────────────────────────────

async def get_current_account(
    account: Annotated[Account, Depends(_get_account_from_token)],
) -> Account:
    """Compte authentifié, profil provisionné ou non."""
    return account


async def get_optional_account(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(optional_bearer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Optional[Account]:
    """Compte de la session ou None, ne lève jamais pour "pas de session"."""
    if credentials is None:
        return None
    return await account_from_token(db, credentials.credentials)


async def get_current_member(
    account: Annotated[Account, Depends(_get_account_from_token)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Profile:
    """Exige un Profile provisionné."""
    result = await db.execute(select(Profile).where(Profile.account_id == account.id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise Forbidden("PROFILE_REQUIRED", "Profil requis.")
    return profile


async def get_current_admin(
    profile: Annotated[Profile, Depends(get_current_member)],
) -> Profile:
    """Exige le flag admin."""
    if not profile.is_admin:
        raise Forbidden("ADMIN_REQUIRED", "Accès administrateur requis.")
    return profile


# ── Type aliases pour les routers ─────────────────────────
DbDep              = Annotated[AsyncSession, Depends(get_db)]
AccountDep         = Annotated[Account, Depends(get_current_account)]
OptionalAccountDep = Annotated[Optional[Account], Depends(get_optional_account)]
MemberDep          = Annotated[Profile, Depends(get_current_member)]
AdminDep           = Annotated[Profile, Depends(get_current_admin)]
