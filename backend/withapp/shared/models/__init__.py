# withapp/shared/models/__init__.py
"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from withapp.shared.models import Profile, Question, Vote, ...

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (Alembic, create_all).
"""

from withapp.shared.models.Account      import Account, Profile
from withapp.shared.models.Question     import Question
from withapp.shared.models.Vote         import Vote
from withapp.shared.models.Notification import Notification
from withapp.shared.models.Board        import BoardPost

__all__ = [
    # Identité
    "Account", "Profile",
    # Question du jour
    "Question",
    # Votes + notifications
    "Vote",
    "Notification",
    # Tableau
    "BoardPost",
]
