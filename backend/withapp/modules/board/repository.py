# modules/board/repository.py
"""
Accès DB pour le tableau communautaire.
L'auteur est toujours chargé en selectinload (relation lazy="raise").
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List, Optional, Dict

from withapp.shared.models import BoardPost


class BoardRepository:

    async def get(self, db: AsyncSession, post_id: int) -> Optional[BoardPost]:
        r = await db.execute(
            select(BoardPost)
            .options(selectinload(BoardPost.author))
            .where(BoardPost.id == post_id)
        )
        return r.scalar_one_or_none()

    async def list_posts(
        self, db: AsyncSession, post_type: Optional[str] = None
    ) -> List[BoardPost]:
        query = select(BoardPost).options(selectinload(BoardPost.author))
        if post_type:
            query = query.where(BoardPost.type == post_type)
        r = await db.execute(query.order_by(BoardPost.created_at.desc(), BoardPost.id.desc()))
        return r.scalars().all()

    async def create(self, db: AsyncSession, data: Dict) -> BoardPost:
        db_obj = BoardPost(**data)
        db.add(db_obj)
        await db.commit()
        # Relecture avec l'auteur chargé
        return await self.get(db, db_obj.id)
