# modules/board/router.py
from fastapi import APIRouter, Query
from typing import List, Optional

from withapp.shared.deps import DbDep, MemberDep
from withapp.modules.board.service import BoardService
from withapp.modules.board.schemas import BoardPostCreateIn, BoardPostOut

router = APIRouter(prefix="/board", tags=["Board"])
service = BoardService()


@router.get("/posts", response_model=List[BoardPostOut])
async def get_posts(
    db: DbDep,
    member: MemberDep,
    type: Optional[str] = Query(None, description="question | improvement"),
):
    return await service.get_posts(db, type)


@router.post("/posts", response_model=BoardPostOut, status_code=201)
async def create_post(payload: BoardPostCreateIn, db: DbDep, member: MemberDep):
    return await service.create_post(db, member, payload.type, payload.content)
