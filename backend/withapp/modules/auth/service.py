# withapp/modules/auth/service.py
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from jose import JWTError
from typing import Optional

from withapp.core.config import settings
from withapp.core.security import (
    hash_password, verify_password,
    create_access_token, create_refresh_token, decode_token,
)
from withapp.modules.auth.schemas import SignUpIn, SignInIn, TokenOut
from withapp.modules.profile.schemas import ProfileOut
from withapp.modules.profile.service import ProfileService
from withapp.shared.errors import ValidationFailed, Unauthorized, Forbidden, Conflict
from withapp.shared.models import Account, Profile

logger = logging.getLogger(__name__)

profile_service = ProfileService()


class AuthService:

    # ── Inscription ──────────────────────────────────────────

    async def sign_up(self, db: AsyncSession, payload: SignUpIn) -> TokenOut:
        """
        Crée le compte puis provisionne le profil.

        Idempotent face aux retries : si le compte existe déjà avec le même
        mot de passe, on renvoie (ou répare) son profil au lieu d'échouer.
        """
        self._assert_password_strength(payload.password)
        nickname = payload.nickname.strip()
        if not nickname:
            raise ValidationFailed("EMPTY_NICKNAME", "Le pseudo est obligatoire.")

        account = await self._get_account_by_email(db, payload.email)
        if account:
            if not verify_password(payload.password, account.hashed_password):
                raise Conflict("EMAIL_ALREADY_USED", "Email déjà utilisé.")
            logger.info("Inscription rejouée pour le compte %s", account.id)
            profile = await profile_service.ensure_profile(db, account, nickname, repair=True)
            return self._build_tokens(account, profile)

        if not await profile_service.is_nickname_available(db, nickname):
            raise Conflict("NICKNAME_TAKEN", "Ce pseudo est déjà utilisé.")

        account = Account(
            email=payload.email,
            hashed_password=hash_password(payload.password),
            signup_nickname=nickname,
        )
        db.add(account)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise Conflict("EMAIL_ALREADY_USED", "Email déjà utilisé.")
        await db.refresh(account)

        profile = await profile_service.ensure_profile(db, account, nickname)
        return self._build_tokens(account, profile)

    # ── Connexion ─────────────────────────────────────────────

    async def sign_in(self, db: AsyncSession, payload: SignInIn) -> TokenOut:
        account = await self._get_account_by_email(db, payload.email)

        if not account or not verify_password(payload.password, account.hashed_password):
            raise Unauthorized("INVALID_CREDENTIALS", "Email ou mot de passe incorrect.")
        if not account.is_active:
            raise Forbidden("ACCOUNT_DISABLED", "Compte désactivé.")

        # Réparation : provisionnement interrompu lors d'une inscription précédente
        try:
            profile = await profile_service.ensure_profile(db, account, repair=True)
        except Conflict as e:
            logger.warning("Profil non réparable pour le compte %s : %s", account.id, e.code)
            profile = None

        return self._build_tokens(account, profile)

    # ── Refresh ───────────────────────────────────────────────

    async def refresh(self, db: AsyncSession, refresh_token: str) -> dict:
        try:
            payload = decode_token(refresh_token)
            if payload.get("type") != "refresh":
                raise ValueError
            account_id = int(payload["sub"])
        except (JWTError, ValueError, KeyError):
            raise Unauthorized("INVALID_TOKEN", "Refresh token invalide.")

        result = await db.execute(select(Account).where(Account.id == account_id))
        account = result.scalar_one_or_none()
        if not account or not account.is_active:
            raise Unauthorized("INVALID_TOKEN", "Compte introuvable.")

        access_token = create_access_token({"sub": str(account.id)})
        return {"access_token": access_token, "token_type": "bearer"}

    # ── Privé ─────────────────────────────────────────────────

    def _assert_password_strength(self, password: str) -> None:
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            raise ValidationFailed(
                "WEAK_PASSWORD",
                f"Le mot de passe doit contenir au moins {settings.PASSWORD_MIN_LENGTH} caractères.",
            )

    async def _get_account_by_email(self, db: AsyncSession, email: str) -> Optional[Account]:
        result = await db.execute(
            select(Account).where(func.lower(Account.email) == email.lower())
        )
        return result.scalar_one_or_none()

    def _build_tokens(self, account: Account, profile: Optional[Profile]) -> TokenOut:
        data = {"sub": str(account.id)}
        return TokenOut(
            access_token=create_access_token(data),
            refresh_token=create_refresh_token(data),
            account_id=account.id,
            profile=ProfileOut.model_validate(profile) if profile else None,
        )
