# withapp/shared/models/Board.py
"""
Tableau communautaire : idées de questions et suggestions d'amélioration.
Append-only, pas d'édition ni de suppression.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from withapp.core.database import Base


class BoardPost(Base):
    __tablename__ = "board_posts"

    id        = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    type      = Column(String, nullable=False, index=True)   # "question" | "improvement"
    content   = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Toujours chargé via selectinload() dans BoardRepository
    author = relationship("Profile", lazy="raise")

    # ── Pass-through helpers ──────────────────────────────────
    @property
    def author_nickname(self) -> str:
        return self.author.nickname if self.author else ""

    def __repr__(self):
        return f"<BoardPost id={self.id} type={self.type} author={self.author_id}>"
