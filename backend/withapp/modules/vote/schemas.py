# withapp/modules/vote/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime, date


# ── Vote ───────────────────────────────────────────────────

class VoteCreateIn(BaseModel):
    """
    candidate_id optionnel côté schéma : l'absence de sélection
    est une erreur métier (NO_CANDIDATE), pas une 422.
    question_content : snapshot affiché au votant ; à défaut, texte courant.
    """
    candidate_id: Optional[int] = None
    question_id: int
    question_content: Optional[str] = Field(None, max_length=200)


class VoteOut(BaseModel):
    id: int
    voter_id: int
    candidate_id: int
    question_id: Optional[int] = None
    question_content: str
    vote_date: date
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class VoteStatusOut(BaseModel):
    vote_date: date
    has_voted_today: bool


# ── Votes reçus (anonymes, jamais de voter_id) ────────────

class ReceivedVoteOut(BaseModel):
    id: int
    question_content: str
    vote_date: date
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class ReceivedSummaryItem(BaseModel):
    question_content: str
    vote_date: date
    count: int


class ReceivedVotesOut(BaseModel):
    total: int
    votes: List[ReceivedVoteOut]
    summary: List[ReceivedSummaryItem]


# ── Admin ──────────────────────────────────────────────────

class VoteDetailOut(VoteOut):
    candidate_nickname: str


class CandidateCountOut(BaseModel):
    candidate_id: int
    nickname: str
    count: int


class VoteStatsOut(BaseModel):
    vote_date: date
    vote_count: int
    member_count: int
    participation_rate: int     # pourcentage arrondi
    ranking: List[CandidateCountOut]
