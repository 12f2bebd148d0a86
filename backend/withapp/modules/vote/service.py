# modules/vote/service.py
"""
Moteur de règles du vote quotidien.

Règles (dans l'ordre d'évaluation) :
    1. un candidat doit être choisi              → ValidationFailed NO_CANDIDATE
    2. pas de vote pour soi-même                 → ValidationFailed SELF_VOTE
    3. candidat et question doivent exister      → NotFound
    4. un seul vote par votant et par jour       → Conflict ALREADY_VOTED_TODAY

Les règles 1-2 sont vérifiées avant tout appel au store.
La règle 4 est vérifiée à l'avance ET garantie par la contrainte
uq_votes_voter_day : deux soumissions concurrentes → une seule passe.

La notification du candidat est "best effort" : son échec est journalisé
mais n'annule jamais le vote déjà enregistré.
"""
import logging
from collections import Counter
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict

from withapp.core.config import settings
from withapp.infra.realtime import change_feed
from withapp.modules.notification.service import NotificationService
from withapp.modules.profile.repository import ProfileRepository
from withapp.modules.question.repository import QuestionRepository
from withapp.modules.vote.repository import VoteRepository
from withapp.modules.vote.schemas import VoteCreateIn, VoteOut, ReceivedVoteOut
from withapp.shared import clock
from withapp.shared.enums import ChangeAction
from withapp.shared.errors import ValidationFailed, NotFound, Conflict
from withapp.shared.models import Profile, Vote

logger = logging.getLogger(__name__)

vote_repo = VoteRepository()
profile_repo = ProfileRepository()
question_repo = QuestionRepository()
notification_service = NotificationService()


class VoteService:

    # ── Statut ────────────────────────────────────────────────

    async def has_voted_today(self, db: AsyncSession, voter_id: int) -> bool:
        return await vote_repo.has_vote_on(db, voter_id, clock.today())

    # ── Vote ──────────────────────────────────────────────────

    async def create_vote(
        self, db: AsyncSession, voter: Profile, payload: VoteCreateIn
    ) -> VoteOut:
        if payload.candidate_id is None:
            raise ValidationFailed("NO_CANDIDATE", "Choisis quelqu'un avant de voter.")
        if payload.candidate_id == voter.id:
            raise ValidationFailed("SELF_VOTE", "Tu ne peux pas voter pour toi-même.")

        candidate = await profile_repo.get_by_id(db, payload.candidate_id)
        if not candidate:
            raise NotFound("CANDIDATE_NOT_FOUND", "Ce membre n'existe pas.")
        question = await question_repo.get(db, payload.question_id)
        if not question:
            raise NotFound("QUESTION_NOT_FOUND", "Question introuvable.")

        day = clock.today()
        if await vote_repo.has_vote_on(db, voter.id, day):
            raise Conflict("ALREADY_VOTED_TODAY", "Tu as déjà voté aujourd'hui.")

        content = (payload.question_content or "").strip() or question.content
        try:
            vote = await vote_repo.create(db, {
                "voter_id":         voter.id,
                "candidate_id":     candidate.id,
                "question_id":      question.id,
                "question_content": content,
                "vote_date":        day,
            })
        except IntegrityError:
            # Soumission concurrente le même jour
            await db.rollback()
            raise Conflict("ALREADY_VOTED_TODAY", "Tu as déjà voté aujourd'hui.")

        result = VoteOut.model_validate(vote)
        logger.info("Vote %s enregistré (%s)", vote.id, day.isoformat())
        change_feed.publish("votes", ChangeAction.INSERT)

        await self._notify_candidate(db, vote)
        return result

    async def _notify_candidate(self, db: AsyncSession, vote: Vote) -> None:
        vote_id = vote.id
        try:
            await notification_service.notify_vote(db, vote)
        except SQLAlchemyError:
            # rollback() expire les instances : plus d'accès aux attributs ensuite
            await db.rollback()
            logger.exception("Notification du vote %s impossible", vote_id)

    # ── Votes reçus ───────────────────────────────────────────

    async def get_votes_for_user(self, db: AsyncSession, candidate_id: int) -> List[Vote]:
        """Plus récents d'abord."""
        return await vote_repo.list_for_candidate(db, candidate_id)

    async def get_received_votes(self, db: AsyncSession, candidate: Profile) -> Dict:
        """
        Vue membre : anonyme (jamais de voter_id) + regroupement
        par (question, jour) pour l'écran "mes votes".
        """
        votes = await self.get_votes_for_user(db, candidate.id)
        counts = Counter((v.question_content, v.vote_date) for v in votes)
        summary = [
            {"question_content": content, "vote_date": day, "count": count}
            for (content, day), count in counts.items()
        ]
        return {
            "total":   len(votes),
            "votes":   [ReceivedVoteOut.model_validate(v) for v in votes],
            "summary": summary,
        }

    # ── Admin ─────────────────────────────────────────────────

    async def get_today_votes(self, db: AsyncSession) -> List[Dict]:
        rows = await vote_repo.list_on_day(db, clock.today())
        return [
            {**VoteOut.model_validate(vote).model_dump(), "candidate_nickname": nickname}
            for vote, nickname in rows
        ]

    async def get_today_stats(self, db: AsyncSession) -> Dict:
        day = clock.today()
        ranking = await vote_repo.count_by_candidate_on_day(db, day)
        member_count = await profile_repo.count_by_affiliation(
            db, settings.COMMUNITY_AFFILIATION
        )
        vote_count = sum(count for _, _, count in ranking)
        # Un vote par membre et par jour → taux de participation
        rate = round(vote_count * 100 / member_count) if member_count else 0

        return {
            "vote_date":          day,
            "vote_count":         vote_count,
            "member_count":       member_count,
            "participation_rate": rate,
            "ranking": [
                {"candidate_id": cid, "nickname": nickname, "count": count}
                for cid, nickname, count in ranking
            ],
        }
