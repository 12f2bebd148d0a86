# modules/question/service.py
"""
Cycle de vie des questions du jour.

Machine à états : chaque question est ACTIVE ou INACTIVE,
au plus une ACTIVE après chaque transition.

    activate()            → transition atomique (voir QuestionRepository.set_active)
    get_active_question() → filet de sécurité : répare l'invariant à la lecture
                            (plusieurs actives → garde la première ;
                             aucune → active la plus petite order_index)
    delete()              → peut laisser zéro active jusqu'à la prochaine lecture
"""
import asyncio
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from withapp.infra.realtime import change_feed
from withapp.modules.question.repository import QuestionRepository
from withapp.shared.enums import ChangeAction, MoveDirection
from withapp.shared.errors import ValidationFailed, NotFound, Conflict
from withapp.shared.models import Question

logger = logging.getLogger(__name__)

question_repo = QuestionRepository()

# Sérialise les seeds concurrents (count puis insert)
_seed_lock = asyncio.Lock()

# Jeu initial, dans l'ordre de rotation
DEFAULT_QUESTIONS = [
    "Avec qui as-tu le plus envie de déjeuner aujourd'hui ?",
    "Qui te fait le plus rire ?",
    "Sur qui aimerais-tu pouvoir t'appuyer dans un moment difficile ?",
    "Qui a le plus de goût selon toi ?",
    "Avec qui partirais-tu bien en voyage ?",
    "Qui est la personne la plus passionnée ?",
    "Avec qui aimerais-tu mener un projet ?",
]


class QuestionService:

    # ── Lecture ───────────────────────────────────────────────

    async def list_questions(self, db: AsyncSession) -> List[Question]:
        return await question_repo.list_all(db)

    async def get_active_question(self, db: AsyncSession) -> Question:
        actives = await question_repo.get_active_list(db)

        if len(actives) == 1:
            return actives[0]

        if len(actives) > 1:
            keep, extras = actives[0], actives[1:]
            logger.warning(
                "%d questions actives détectées, conservation de %s", len(actives), keep.id
            )
            await question_repo.deactivate(db, [q.id for q in extras])
            change_feed.publish("questions", ChangeAction.UPDATE)
            return keep

        first = await question_repo.get_first(db)
        if not first:
            raise NotFound("NO_QUESTIONS", "Aucune question disponible.")

        logger.info("Aucune question active, activation de %s", first.id)
        return await self._activate(db, first.id)

    # ── Administration ───────────────────────────────────────

    async def create(self, db: AsyncSession, payload) -> Question:
        content = self._clean_content(payload.content)

        order_index = payload.order_index
        if order_index is None:
            current_max = await question_repo.max_order_index(db)
            order_index = 0 if current_max is None else current_max + 1

        question = await question_repo.create(db, {
            "content":     content,
            "order_index": order_index,
            "is_active":   False,
        })
        change_feed.publish("questions", ChangeAction.INSERT)
        return question

    async def update(self, db: AsyncSession, question_id: int, payload) -> Question:
        """
        content et order_index modifiables indépendamment.
        Les votes passés gardent leur snapshot de texte.
        """
        question = await self._get_or_404(db, question_id)

        data = {"order_index": payload.order_index}
        if payload.content is not None:
            data["content"] = self._clean_content(payload.content)

        question = await question_repo.update_fields(db, question, data)
        change_feed.publish("questions", ChangeAction.UPDATE)
        return question

    async def reorder(
        self, db: AsyncSession, question_id: int, direction: MoveDirection
    ) -> Question:
        """Échange order_index avec la voisine. No-op aux extrémités."""
        questions = await question_repo.list_all(db)
        position = next((i for i, q in enumerate(questions) if q.id == question_id), None)
        if position is None:
            raise NotFound("QUESTION_NOT_FOUND", "Question introuvable.")

        neighbour_pos = position - 1 if direction == MoveDirection.UP else position + 1
        if neighbour_pos < 0 or neighbour_pos >= len(questions):
            return questions[position]

        await question_repo.swap_order(db, questions[position], questions[neighbour_pos])
        change_feed.publish("questions", ChangeAction.UPDATE)
        return questions[position]

    async def delete(self, db: AsyncSession, question_id: int) -> None:
        question = await self._get_or_404(db, question_id)
        await question_repo.delete(db, question)
        change_feed.publish("questions", ChangeAction.DELETE)

    async def activate(self, db: AsyncSession, question_id: int) -> Question:
        return await self._activate(db, question_id)

    async def initialize_defaults(self, db: AsyncSession) -> List[Question]:
        """Seed uniquement si la table est vide. Active la première question."""
        async with _seed_lock:
            if await question_repo.count(db) > 0:
                return []

            created = await question_repo.create_many(db, [
                {"content": content, "order_index": i, "is_active": False}
                for i, content in enumerate(DEFAULT_QUESTIONS)
            ])
            change_feed.publish("questions", ChangeAction.INSERT)
            logger.info("%d questions par défaut insérées", len(created))

            first = await self._activate(db, created[0].id)
        return [first if q.id == first.id else q for q in created]

    # ── Internals ─────────────────────────────────────────────

    async def _activate(self, db: AsyncSession, question_id: int) -> Question:
        try:
            question = await question_repo.set_active(db, question_id)
        except IntegrityError:
            # Activation concurrente : l'index unique partiel a refusé le commit
            await db.rollback()
            raise Conflict("ACTIVATION_CONFLICT", "Une autre activation est en cours, réessayez.")

        if question is None:
            raise NotFound("QUESTION_NOT_FOUND", "Question introuvable.")

        change_feed.publish("questions", ChangeAction.UPDATE)
        return question

    async def _get_or_404(self, db: AsyncSession, question_id: int) -> Question:
        question = await question_repo.get(db, question_id)
        if not question:
            raise NotFound("QUESTION_NOT_FOUND", "Question introuvable.")
        return question

    def _clean_content(self, content: str) -> str:
        content = (content or "").strip()
        if not content:
            raise ValidationFailed("EMPTY_CONTENT", "Le texte de la question est obligatoire.")
        return content
