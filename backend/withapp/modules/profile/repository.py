# modules/profile/repository.py
"""
Accès DB pour les profils communautaires.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Optional, Dict

from withapp.shared.models import Profile


class ProfileRepository:

    async def get_by_id(self, db: AsyncSession, profile_id: int) -> Optional[Profile]:
        r = await db.execute(select(Profile).where(Profile.id == profile_id))
        return r.scalar_one_or_none()

    async def get_by_account_id(self, db: AsyncSession, account_id: int) -> Optional[Profile]:
        r = await db.execute(select(Profile).where(Profile.account_id == account_id))
        return r.scalar_one_or_none()

    async def list_by_affiliation(self, db: AsyncSession, affiliation: str) -> List[Profile]:
        r = await db.execute(
            select(Profile)
            .where(Profile.affiliation == affiliation)
            .order_by(Profile.created_at.asc(), Profile.id.asc())
        )
        return r.scalars().all()

    async def count_by_affiliation(self, db: AsyncSession, affiliation: str) -> int:
        r = await db.execute(
            select(func.count(Profile.id)).where(Profile.affiliation == affiliation)
        )
        return r.scalar_one()

    async def nickname_taken(self, db: AsyncSession, affiliation: str, nickname: str) -> bool:
        r = await db.execute(
            select(Profile.id).where(
                Profile.affiliation == affiliation,
                Profile.nickname == nickname,
            )
        )
        return r.first() is not None

    async def create(self, db: AsyncSession, data: Dict) -> Profile:
        """Commit immédiat. Laisse remonter IntegrityError (doublon) à l'appelant."""
        db_obj = Profile(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
