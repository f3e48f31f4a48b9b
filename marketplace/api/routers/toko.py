"""
상점(toko) API
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.dependencies import CurrentUser, Pagination, get_current_user
from marketplace.api.responses import success
from marketplace.models.payloads import page_payload, toko_payload
from marketplace.monitoring import get_logger
from marketplace.services.stores import TokoService
from marketplace.storage.database import get_db

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def list_toko(
    request: Request,
    nama: Optional[str] = Query(None, description="상점명 검색어"),
    pagination: Pagination = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """상점 목록 (공개)"""
    records = await TokoService(session).list(pagination.limit, pagination.page, nama)
    return success(
        request,
        page_payload([toko_payload(toko) for toko in records], pagination.limit, pagination.page),
    )


# /toko/{toko_id} 보다 먼저 등록
@router.get("/my")
async def get_my_toko(
    request: Request,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 상점 조회"""
    toko = await TokoService(session).get_my(user.id)
    return success(request, toko_payload(toko))


@router.get("/{toko_id}")
async def get_toko(request: Request, toko_id: int, session: AsyncSession = Depends(get_db)):
    """상점 상세 (공개)"""
    toko = await TokoService(session).get(toko_id)
    return success(request, toko_payload(toko))


async def _update(
    request: Request,
    session: AsyncSession,
    user: CurrentUser,
    nama_toko: Optional[str],
    url_foto: Optional[str],
    photo: Optional[UploadFile],
    toko_id: Optional[int] = None,
):
    toko = await TokoService(session).update_my(
        user.id, nama_toko=nama_toko, url_foto=url_foto, photo=photo, toko_id=toko_id
    )
    return success(request, toko_payload(toko))


@router.put("")
async def update_my_toko(
    request: Request,
    nama_toko: Optional[str] = Form(None),
    url_foto: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 상점 수정 (form / multipart)"""
    return await _update(request, session, user, nama_toko, url_foto, photo)


@router.put("/{toko_id}")
async def update_toko(
    request: Request,
    toko_id: int,
    nama_toko: Optional[str] = Form(None),
    url_foto: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """상점 수정 (본인 상점이 아니면 403)"""
    return await _update(request, session, user, nama_toko, url_foto, photo, toko_id)
