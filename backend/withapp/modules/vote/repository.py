# modules/vote/repository.py
"""
Accès DB pour les votes.

Les lectures "détaillées" (avec pseudo du candidat) font une jointure
explicite sur profiles, jamais de lazy-load en async.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Dict, Tuple
from datetime import date

from withapp.shared.models import Vote, Profile


class VoteRepository:

    async def has_vote_on(self, db: AsyncSession, voter_id: int, day: date) -> bool:
        r = await db.execute(
            select(Vote.id)
            .where(Vote.voter_id == voter_id, Vote.vote_date == day)
            .limit(1)
        )
        return r.first() is not None

    async def create(self, db: AsyncSession, data: Dict) -> Vote:
        """Laisse remonter IntegrityError (uq_votes_voter_day) à l'appelant."""
        db_obj = Vote(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def list_for_candidate(self, db: AsyncSession, candidate_id: int) -> List[Vote]:
        r = await db.execute(
            select(Vote)
            .where(Vote.candidate_id == candidate_id)
            .order_by(Vote.created_at.desc(), Vote.id.desc())
        )
        return r.scalars().all()

    async def list_on_day(self, db: AsyncSession, day: date) -> List[Tuple[Vote, str]]:
        """(vote, pseudo du candidat) pour un jour donné."""
        r = await db.execute(
            select(Vote, Profile.nickname)
            .join(Profile, Profile.id == Vote.candidate_id)
            .where(Vote.vote_date == day)
            .order_by(Vote.created_at.asc(), Vote.id.asc())
        )
        return [(vote, nickname) for vote, nickname in r.all()]

    async def count_by_candidate_on_day(
        self, db: AsyncSession, day: date
    ) -> List[Tuple[int, str, int]]:
        """(candidate_id, pseudo, nb de votes), du plus voté au moins voté."""
        vote_count = func.count(Vote.id).label("vote_count")
        r = await db.execute(
            select(Vote.candidate_id, Profile.nickname, vote_count)
            .join(Profile, Profile.id == Vote.candidate_id)
            .where(Vote.vote_date == day)
            .group_by(Vote.candidate_id, Profile.nickname)
            .order_by(vote_count.desc(), Profile.nickname.asc())
        )
        return [(cid, nickname, count) for cid, nickname, count in r.all()]
