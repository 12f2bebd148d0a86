# modules/vote/router.py
from fastapi import APIRouter
from typing import List

from withapp.shared import clock
from withapp.shared.deps import DbDep, MemberDep, AdminDep
from withapp.modules.vote.service import VoteService
from withapp.modules.vote.schemas import (
    VoteCreateIn,
    VoteOut,
    VoteStatusOut,
    ReceivedVotesOut,
    VoteDetailOut,
    VoteStatsOut,
)

router = APIRouter(prefix="/votes", tags=["Votes"])
service = VoteService()


# ── Membre ─────────────────────────────────────────────────

@router.get("/today/status", response_model=VoteStatusOut)
async def get_today_status(db: DbDep, member: MemberDep):
    return {
        "vote_date":       clock.today(),
        "has_voted_today": await service.has_voted_today(db, member.id),
    }


@router.post("", response_model=VoteOut, status_code=201)
async def create_vote(payload: VoteCreateIn, db: DbDep, member: MemberDep):
    return await service.create_vote(db, member, payload)


@router.get("/received", response_model=ReceivedVotesOut, summary="Votes reçus (anonymes)")
async def get_received_votes(db: DbDep, member: MemberDep):
    return await service.get_received_votes(db, member)


# ── Admin ──────────────────────────────────────────────────

@router.get("/today", response_model=List[VoteDetailOut])
async def get_today_votes(db: DbDep, admin: AdminDep):
    return await service.get_today_votes(db)


@router.get("/today/stats", response_model=VoteStatsOut)
async def get_today_stats(db: DbDep, admin: AdminDep):
    return await service.get_today_stats(db)


@router.get("/candidate/{candidate_id}", response_model=List[VoteOut])
async def get_votes_for_user(candidate_id: int, db: DbDep, admin: AdminDep):
    return await service.get_votes_for_user(db, candidate_id)
