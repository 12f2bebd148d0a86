# modules/board/service.py
"""
Tableau communautaire : idées de questions et suggestions d'amélioration.
Lecture ouverte à tous les membres, plus récents d'abord.
"""
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from withapp.infra.realtime import change_feed
from withapp.modules.board.repository import BoardRepository
from withapp.shared.enums import BoardPostType, ChangeAction, POSTABLE_TYPES
from withapp.shared.errors import ValidationFailed
from withapp.shared.models import BoardPost, Profile

logger = logging.getLogger(__name__)

board_repo = BoardRepository()


def parse_post_type(value: Optional[str]) -> BoardPostType:
    """Seuls QUESTION et IMPROVEMENT sont acceptés en écriture ou en filtre."""
    post_type = BoardPostType(value) if value else BoardPostType.OTHER
    if post_type not in POSTABLE_TYPES:
        raise ValidationFailed("INVALID_POST_TYPE", "Type de post non supporté.")
    return post_type


class BoardService:

    async def get_posts(
        self, db: AsyncSession, post_type: Optional[str] = None
    ) -> List[BoardPost]:
        if post_type is None:
            return await board_repo.list_posts(db)
        return await board_repo.list_posts(db, parse_post_type(post_type).value)

    async def create_post(
        self, db: AsyncSession, author: Profile, post_type: str, content: str
    ) -> BoardPost:
        kind = parse_post_type(post_type)
        content = (content or "").strip()
        if not content:
            raise ValidationFailed("EMPTY_CONTENT", "Le contenu ne peut pas être vide.")

        post = await board_repo.create(db, {
            "author_id": author.id,
            "type":      kind.value,
            "content":   content,
        })
        logger.info("Post %s (%s) publié par le profil %s", post.id, kind.value, author.id)
        change_feed.publish("board_posts", ChangeAction.INSERT)
        return post
