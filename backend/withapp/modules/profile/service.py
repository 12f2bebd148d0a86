# modules/profile/service.py
"""
Identité communautaire : Account → Profile.

Responsabilités :
1. Provisionnement idempotent du Profile (inscription + réparation à la connexion)
2. Lecture du profil de la session (None si pas de session, jamais d'exception)
3. Roster de l'affiliation et pool de candidats pour le vote

Règle de provisionnement :
    - affiliation = settings.COMMUNITY_AFFILIATION (affiliation unique)
    - is_admin    = email == settings.ADMIN_EMAIL
    - un Profile existant pour le compte est toujours renvoyé tel quel
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from withapp.core.config import settings
from withapp.infra.realtime import change_feed
from withapp.modules.profile.repository import ProfileRepository
from withapp.shared.enums import ChangeAction
from withapp.shared.errors import Conflict
from withapp.shared.models import Account, Profile

logger = logging.getLogger(__name__)

profile_repo = ProfileRepository()


def is_admin_email(email: str) -> bool:
    return bool(settings.ADMIN_EMAIL) and email.lower() == settings.ADMIN_EMAIL.lower()


def default_nickname(email: str) -> str:
    return email.split("@")[0] or "membre"


class ProfileService:

    # ── Lecture ───────────────────────────────────────────────

    async def get_profile(
        self, db: AsyncSession, account: Optional[Account]
    ) -> Optional[Profile]:
        if account is None:
            return None
        return await profile_repo.get_by_account_id(db, account.id)

    async def get_all_profiles(self, db: AsyncSession) -> List[Profile]:
        return await profile_repo.list_by_affiliation(db, settings.COMMUNITY_AFFILIATION)

    async def get_candidates(self, db: AsyncSession, voter: Profile) -> List[Profile]:
        """Tout le roster sauf le votant, ni filtre, ni tirage aléatoire."""
        profiles = await self.get_all_profiles(db)
        return [p for p in profiles if p.id != voter.id]

    async def is_nickname_available(self, db: AsyncSession, nickname: str) -> bool:
        return not await profile_repo.nickname_taken(
            db, settings.COMMUNITY_AFFILIATION, nickname
        )

    # ── Provisionnement ──────────────────────────────────────

    async def ensure_profile(
        self,
        db: AsyncSession,
        account: Account,
        nickname: Optional[str] = None,
        repair: bool = False,
    ) -> Profile:
        """
        Retourne le Profile du compte, en le créant s'il manque.

        repair=True (connexion) : si le pseudo a été pris entre-temps,
        on le suffixe avec l'id du compte plutôt que d'échouer.
        """
        existing = await profile_repo.get_by_account_id(db, account.id)
        if existing:
            return existing

        nickname = (nickname or account.signup_nickname or default_nickname(account.email)).strip()
        if not await self.is_nickname_available(db, nickname):
            if not repair:
                raise Conflict("NICKNAME_TAKEN", "Ce pseudo est déjà utilisé.")
            nickname = f"{nickname}#{account.id}"

        try:
            profile = await profile_repo.create(db, {
                "account_id":  account.id,
                "email":       account.email,
                "nickname":    nickname,
                "affiliation": settings.COMMUNITY_AFFILIATION,
                "is_admin":    is_admin_email(account.email),
            })
        except IntegrityError:
            # Provisionnement concurrent : l'autre requête a gagné
            await db.rollback()
            await db.refresh(account)
            existing = await profile_repo.get_by_account_id(db, account.id)
            if existing:
                return existing
            raise Conflict("NICKNAME_TAKEN", "Ce pseudo est déjà utilisé.")

        logger.info("Profil %s provisionné pour le compte %s", profile.id, account.id)
        change_feed.publish("profiles", ChangeAction.INSERT)
        return profile
