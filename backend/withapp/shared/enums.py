# withapp/shared/enums.py
"""
Toutes les énumérations du projet with.

Source unique de vérité pour les types de notification, de post et de déplacement.
Importé par les modèles, schemas, services et routers.

Les colonnes `type` sont stockées en texte libre : toute valeur inconnue
lue en base est ramenée sur la variante OTHER plutôt que de lever.
"""

from enum import Enum


class NotificationType(str, Enum):
    VOTE           = "vote"
    SYSTEM         = "system"
    FRIEND_REQUEST = "friend_request"
    OTHER          = "other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class BoardPostType(str, Enum):
    QUESTION    = "question"       # Idée de nouvelle question du jour
    IMPROVEMENT = "improvement"    # Suggestion d'amélioration du service
    OTHER       = "other"          # Lecture seule, jamais accepté en écriture

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


# Types acceptés à la création d'un post
POSTABLE_TYPES = (BoardPostType.QUESTION, BoardPostType.IMPROVEMENT)


class MoveDirection(str, Enum):
    UP   = "up"
    DOWN = "down"


class ChangeAction(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
