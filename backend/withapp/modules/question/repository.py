# modules/question/repository.py
"""
Accès DB pour les questions du jour.

set_active() enchaîne "tout désactiver" puis "activer la cible"
dans une seule transaction : un lecteur ne voit jamais deux questions actives.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func
from typing import List, Optional, Dict

from withapp.shared.models import Question


class QuestionRepository:

    async def list_all(self, db: AsyncSession) -> List[Question]:
        r = await db.execute(
            select(Question).order_by(Question.order_index.asc(), Question.id.asc())
        )
        return r.scalars().all()

    async def get(self, db: AsyncSession, question_id: int) -> Optional[Question]:
        r = await db.execute(select(Question).where(Question.id == question_id))
        return r.scalar_one_or_none()

    async def get_active_list(self, db: AsyncSession) -> List[Question]:
        r = await db.execute(
            select(Question)
            .where(Question.is_active == True)
            .order_by(Question.order_index.asc(), Question.id.asc())
        )
        return r.scalars().all()

    async def get_first(self, db: AsyncSession) -> Optional[Question]:
        r = await db.execute(
            select(Question)
            .order_by(Question.order_index.asc(), Question.id.asc())
            .limit(1)
        )
        return r.scalar_one_or_none()

    async def count(self, db: AsyncSession) -> int:
        r = await db.execute(select(func.count(Question.id)))
        return r.scalar_one()

    async def max_order_index(self, db: AsyncSession) -> Optional[int]:
        r = await db.execute(select(func.max(Question.order_index)))
        return r.scalar_one_or_none()

    # ── Écritures ─────────────────────────────────────────────

    async def create(self, db: AsyncSession, data: Dict) -> Question:
        db_obj = Question(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def create_many(self, db: AsyncSession, rows: List[Dict]) -> List[Question]:
        objs = [Question(**row) for row in rows]
        db.add_all(objs)
        await db.commit()
        for obj in objs:
            await db.refresh(obj)
        return objs

    async def update_fields(
        self, db: AsyncSession, question: Question, data: Dict
    ) -> Question:
        for key, value in data.items():
            if value is not None and hasattr(question, key):
                setattr(question, key, value)
        await db.commit()
        await db.refresh(question)
        return question

    async def swap_order(self, db: AsyncSession, a: Question, b: Question) -> None:
        a.order_index, b.order_index = b.order_index, a.order_index
        await db.commit()

    async def set_active(self, db: AsyncSession, question_id: int) -> Optional[Question]:
        """
        Désactive toutes les questions puis active la cible, en un commit.
        Retourne None (et annule) si la cible n'existe pas.
        """
        await db.execute(
            update(Question).where(Question.is_active == True).values(is_active=False)
        )
        r = await db.execute(
            update(Question).where(Question.id == question_id).values(is_active=True)
        )
        if r.rowcount == 0:
            await db.rollback()
            return None
        await db.commit()

        question = await self.get(db, question_id)
        await db.refresh(question)
        return question

    async def deactivate(self, db: AsyncSession, question_ids: List[int]) -> None:
        await db.execute(
            update(Question).where(Question.id.in_(question_ids)).values(is_active=False)
        )
        await db.commit()

    async def delete(self, db: AsyncSession, question: Question) -> None:
        await db.delete(question)
        await db.commit()
