# modules/question/router.py
"""
Endpoints des questions du jour.

Deux acteurs :
- Membre : lit la liste et la question active
- Admin  : crée, édite, réordonne, active, supprime, seed
"""
from fastapi import APIRouter, status
from typing import List

from withapp.shared.deps import DbDep, MemberDep, AdminDep
from withapp.modules.question.service import QuestionService
from withapp.modules.question.schemas import (
    QuestionOut,
    QuestionCreateIn,
    QuestionUpdateIn,
    QuestionMoveIn,
)

router = APIRouter(prefix="/questions", tags=["Questions"])
service = QuestionService()


# ─────────────────────────────────────────────
# MEMBRE : Lecture
# ─────────────────────────────────────────────

@router.get("", response_model=List[QuestionOut], summary="Toutes les questions (ordre de rotation)")
async def list_questions(db: DbDep, member: MemberDep):
    return await service.list_questions(db)


@router.get(
    "/active",
    response_model=QuestionOut,
    summary="Question du jour",
    description="Active la première question si aucune ne l'est. 404 si la table est vide.",
)
async def get_active_question(db: DbDep, member: MemberDep):
    return await service.get_active_question(db)


# ─────────────────────────────────────────────
# ADMIN : Gestion
# ─────────────────────────────────────────────

@router.post("", response_model=QuestionOut, status_code=status.HTTP_201_CREATED)
async def create_question(payload: QuestionCreateIn, db: DbDep, admin: AdminDep):
    """Nouvelle question, inactive."""
    return await service.create(db, payload)


@router.post(
    "/defaults",
    response_model=List[QuestionOut],
    summary="Insérer les questions par défaut",
    description="No-op (liste vide) si des questions existent déjà.",
)
async def initialize_defaults(db: DbDep, admin: AdminDep):
    return await service.initialize_defaults(db)


@router.patch("/{question_id}", response_model=QuestionOut)
async def update_question(question_id: int, payload: QuestionUpdateIn, db: DbDep, admin: AdminDep):
    return await service.update(db, question_id, payload)


@router.post("/{question_id}/move", response_model=QuestionOut)
async def move_question(question_id: int, payload: QuestionMoveIn, db: DbDep, admin: AdminDep):
    return await service.reorder(db, question_id, payload.direction)


@router.post("/{question_id}/activate", response_model=QuestionOut)
async def activate_question(question_id: int, db: DbDep, admin: AdminDep):
    return await service.activate(db, question_id)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(question_id: int, db: DbDep, admin: AdminDep):
    await service.delete(db, question_id)
