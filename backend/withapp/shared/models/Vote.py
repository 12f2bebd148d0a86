# withapp/shared/models/Vote.py
"""
Vote anonyme : un membre désigne un autre membre pour la question du jour.

- question_content : snapshot du texte au moment du vote, indépendant
  des éditions ultérieures de Question.content.
- vote_date : jour calendaire (cf. shared/clock.py). La contrainte
  uq_votes_voter_day porte la règle "un vote par jour" même sous
  deux requêtes quasi simultanées.
- Immuable : jamais mis à jour ni supprimé.
"""
from sqlalchemy import (
    Column, Integer, String, Date, DateTime, ForeignKey,
    UniqueConstraint, CheckConstraint,
)
from sqlalchemy.sql import func

from withapp.core.database import Base


class Vote(Base):
    __tablename__ = "votes"

    id           = Column(Integer, primary_key=True, index=True)
    voter_id     = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    question_id  = Column(Integer, ForeignKey("questions.id", ondelete="SET NULL"), nullable=True)

    question_content = Column(String, nullable=False)
    vote_date        = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("voter_id", "vote_date", name="uq_votes_voter_day"),
        CheckConstraint("voter_id <> candidate_id", name="ck_votes_no_self_vote"),
    )

    def __repr__(self):
        return f"<Vote id={self.id} candidate={self.candidate_id} date={self.vote_date}>"
