"""
회원 정보 / 배송지 API
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.dependencies import CurrentUser, get_current_user
from marketplace.api.responses import success
from marketplace.models.payloads import alamat_payload, user_payload
from marketplace.models.requests import AlamatRequest, UpdateUserRequest
from marketplace.monitoring import get_logger
from marketplace.services.addresses import AlamatService
from marketplace.services.users import UserService
from marketplace.storage.database import get_db

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def get_me(
    request: Request,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 정보 조회"""
    profile = await UserService(session).get_profile(user.id)
    return success(request, user_payload(profile))


@router.put("")
async def update_me(
    request: Request,
    payload: UpdateUserRequest,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 정보 수정"""
    profile = await UserService(session).update_profile(user.id, payload)
    return success(request, user_payload(profile))


# 배송지


@router.get("/alamat")
async def list_alamat(
    request: Request,
    judul_alamat: Optional[str] = Query(None, description="제목 검색어"),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 배송지 목록"""
    records = await AlamatService(session).list(user.id, judul_alamat)
    return success(request, [alamat_payload(alamat) for alamat in records])


@router.get("/alamat/{alamat_id}")
async def get_alamat(
    request: Request,
    alamat_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    alamat = await AlamatService(session).get(user.id, alamat_id)
    return success(request, alamat_payload(alamat))


@router.post("/alamat")
async def create_alamat(
    request: Request,
    payload: AlamatRequest,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """배송지 등록"""
    alamat = await AlamatService(session).create(user.id, payload)
    return success(request, alamat.id)


@router.put("/alamat/{alamat_id}")
async def update_alamat(
    request: Request,
    alamat_id: int,
    payload: AlamatRequest,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    alamat = await AlamatService(session).update(user.id, alamat_id, payload)
    return success(request, alamat_payload(alamat))


@router.delete("/alamat/{alamat_id}")
async def delete_alamat(
    request: Request,
    alamat_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """배송지 삭제"""
    await AlamatService(session).delete(user.id, alamat_id)
    return success(request, "")
