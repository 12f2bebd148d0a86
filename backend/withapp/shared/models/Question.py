# withapp/shared/models/Question.py
"""
Question du jour (prompt).

Invariant : au plus une question active à tout instant.
Garanti côté store par l'index unique partiel uq_questions_single_active,
côté service par QuestionService.activate() (transaction unique)
et réparé à la lecture par get_active_question().

order_index définit l'ordre d'affichage / de rotation, pas forcément contigu.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, text
from sqlalchemy.sql import func

from withapp.core.database import Base


class Question(Base):
    __tablename__ = "questions"

    id          = Column(Integer, primary_key=True, index=True)
    content     = Column(String, nullable=False)
    is_active   = Column(Boolean, default=False, nullable=False)
    order_index = Column(Integer, default=0, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        Index(
            "uq_questions_single_active", "is_active",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
    )

    def __repr__(self):
        return f"<Question id={self.id} order={self.order_index} active={self.is_active}>"
