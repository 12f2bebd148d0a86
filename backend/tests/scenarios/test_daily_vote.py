# tests/scenarios/test_daily_vote.py
"""
Parcours complets du vote quotidien sur une vraie base (SQLite en mémoire).

Couverture :
    - A vote pour B : vote enregistré, notification pour B, statut du jour
    - Second vote le même jour → refusé, un seul vote pour A
    - Course concurrente : la contrainte unique rejette le second vote
    - Vote pour soi → refusé, aucune écriture
    - Jour suivant → nouveau vote autorisé
    - Lu / non lu : compteur à 0 après mark_all_as_read, idempotent
"""
import pytest
from datetime import date
from unittest.mock import AsyncMock
from sqlalchemy import select, func

from withapp.modules.notification.service import NotificationService
from withapp.modules.question.schemas import QuestionCreateIn
from withapp.modules.question.service import QuestionService
from withapp.modules.vote.schemas import VoteCreateIn
from withapp.modules.vote.service import VoteService
from withapp.shared.enums import NotificationType
from withapp.shared.errors import Conflict, ValidationFailed
from withapp.shared.models import Vote

pytestmark = pytest.mark.scenario

votes = VoteService()
questions = QuestionService()
notifications = NotificationService()


async def _active_prompt(db, content="P1"):
    prompt = await questions.create(db, QuestionCreateIn(content=content))
    return await questions.activate(db, prompt.id)


async def _vote_count(db, voter_id):
    r = await db.execute(select(func.count(Vote.id)).where(Vote.voter_id == voter_id))
    return r.scalar_one()


def _ballot(candidate, prompt):
    return VoteCreateIn(
        candidate_id=candidate.id, question_id=prompt.id, question_content=prompt.content,
    )


@pytest.mark.asyncio
async def test_vote_notification_et_un_vote_par_jour(db, seed_members):
    a, b, c, d = await seed_members("A", "B", "C", "D")
    p1 = await _active_prompt(db)

    await votes.create_vote(db, a, _ballot(b, p1))

    stored = (await db.execute(select(Vote))).scalars().all()
    assert [(v.voter_id, v.candidate_id, v.question_id) for v in stored] == [(a.id, b.id, p1.id)]

    feed = await notifications.get_notifications(db, b.id)
    assert len(feed) == 1
    assert NotificationType(feed[0].type) == NotificationType.VOTE
    assert "P1" in feed[0].message
    assert feed[0].meta["vote_id"] == stored[0].id

    assert await votes.has_voted_today(db, a.id) is True
    assert await votes.has_voted_today(db, c.id) is False

    with pytest.raises(Conflict) as exc_info:
        await votes.create_vote(db, a, _ballot(c, p1))

    assert exc_info.value.code == "ALREADY_VOTED_TODAY"
    assert await _vote_count(db, a.id) == 1
    assert await notifications.get_notifications(db, c.id) == []


@pytest.mark.asyncio
async def test_course_concurrente_rejetee_par_la_base(db, seed_members, mocker):
    """Le pré-contrôle ne voit pas le premier vote : la contrainte unique tranche."""
    a, b, c = await seed_members("A", "B", "C")
    a_id = a.id
    p1 = await _active_prompt(db)
    await votes.create_vote(db, a, _ballot(b, p1))

    mocker.patch(
        "withapp.modules.vote.service.vote_repo.has_vote_on",
        AsyncMock(return_value=False),
    )
    with pytest.raises(Conflict):
        await votes.create_vote(db, a, _ballot(c, p1))

    # rollback() a expiré les instances de la session
    assert await _vote_count(db, a_id) == 1


@pytest.mark.asyncio
async def test_vote_pour_soi_refuse(db, seed_members):
    a, b = await seed_members("A", "B")
    p1 = await _active_prompt(db)

    with pytest.raises(ValidationFailed):
        await votes.create_vote(db, a, _ballot(a, p1))

    assert await _vote_count(db, a.id) == 0


@pytest.mark.asyncio
async def test_nouveau_vote_le_lendemain(db, seed_members, mocker):
    a, b, c = await seed_members("A", "B", "C")
    p1 = await _active_prompt(db)
    today = mocker.patch("withapp.shared.clock.today", return_value=date(2025, 3, 10))

    await votes.create_vote(db, a, _ballot(b, p1))
    today.return_value = date(2025, 3, 11)
    await votes.create_vote(db, a, _ballot(c, p1))

    assert await _vote_count(db, a.id) == 2
    received = await votes.get_received_votes(db, c)
    assert received["total"] == 1


@pytest.mark.asyncio
async def test_lu_non_lu_monotone(db, seed_members, mocker):
    a, b, c = await seed_members("A", "B", "C")
    p1 = await _active_prompt(db)
    today = mocker.patch("withapp.shared.clock.today", return_value=date(2025, 3, 10))
    await votes.create_vote(db, a, _ballot(b, p1))
    await votes.create_vote(db, c, _ballot(b, p1))
    today.return_value = date(2025, 3, 11)
    await votes.create_vote(db, a, _ballot(b, p1))

    assert await notifications.get_unread_count(db, b.id) == 3

    assert await notifications.mark_all_as_read(db, b.id) == 3
    assert await notifications.get_unread_count(db, b.id) == 0
    assert await notifications.mark_all_as_read(db, b.id) == 0
    assert await notifications.get_unread_count(db, b.id) == 0

    summary = (await votes.get_received_votes(db, b))["summary"]
    assert sorted(s["count"] for s in summary) == [1, 2]
