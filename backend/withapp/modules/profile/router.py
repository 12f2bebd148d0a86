# modules/profile/router.py
"""
Endpoints du roster communautaire.

GET /profiles/me ne lève jamais pour une session absente : il renvoie null.
"""
from fastapi import APIRouter
from typing import List, Optional

from withapp.shared.deps import DbDep, OptionalAccountDep, MemberDep
from withapp.modules.profile.service import ProfileService
from withapp.modules.profile.schemas import ProfileOut, MemberOut

router = APIRouter(prefix="/profiles", tags=["Profiles"])
service = ProfileService()


@router.get("/me", response_model=Optional[ProfileOut], summary="Profil de la session")
async def get_my_profile(db: DbDep, account: OptionalAccountDep):
    return await service.get_profile(db, account)


@router.get("", response_model=List[MemberOut], summary="Membres de la communauté")
async def get_all_profiles(db: DbDep, member: MemberDep):
    """Ordre d'inscription croissant."""
    return await service.get_all_profiles(db)


@router.get("/candidates", response_model=List[MemberOut], summary="Candidats au vote du jour")
async def get_candidates(db: DbDep, member: MemberDep):
    return await service.get_candidates(db, member)
