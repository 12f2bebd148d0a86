# withapp/shared/clock.py
"""
Frontière du "jour calendaire" pour la règle un-vote-par-jour.

Le jour est calculé dans settings.VOTE_DAY_TIMEZONE (UTC par défaut),
jamais dans l'heure locale du serveur.
"""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from withapp.core.config import settings


def now() -> datetime:
    return datetime.now(ZoneInfo(settings.VOTE_DAY_TIMEZONE))


def today() -> date:
    return now().date()
