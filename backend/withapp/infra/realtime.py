# withapp/infra/realtime.py
"""
Flux de changements par table, signal "quelque chose a changé, relis".

Les abonnés ne reçoivent jamais de données métier : uniquement la table
et l'action. C'est au client de relire via l'API.

    dispose = change_feed.subscribe("votes", handler)
    ...
    dispose()

Les services publient après chaque commit réussi. Un abonné qui lève
est journalisé puis ignoré : l'écriture reste valide.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from withapp.shared.enums import ChangeAction

logger = logging.getLogger(__name__)

TABLES = ("profiles", "questions", "votes", "notifications", "board_posts")


@dataclass(frozen=True)
class ChangeEvent:
    table: str
    action: ChangeAction


Handler = Callable[[ChangeEvent], None]


class ChangeFeed:

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {table: [] for table in TABLES}

    def subscribe(self, table: str, handler: Handler) -> Callable[[], None]:
        if table not in self._handlers:
            raise ValueError(f"Table inconnue : {table}")
        self._handlers[table].append(handler)

        def dispose() -> None:
            if handler in self._handlers[table]:
                self._handlers[table].remove(handler)

        return dispose

    def publish(self, table: str, action: ChangeAction) -> None:
        event = ChangeEvent(table=table, action=action)
        for handler in list(self._handlers.get(table, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("Abonné realtime en échec sur %s", table)

    def subscriber_count(self, table: str) -> int:
        return len(self._handlers.get(table, []))


change_feed = ChangeFeed()
