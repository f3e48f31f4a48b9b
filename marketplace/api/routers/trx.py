"""
주문(trx) API
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.dependencies import CurrentUser, Pagination, get_current_user
from marketplace.api.responses import success
from marketplace.models.payloads import page_payload, trx_payload
from marketplace.models.requests import TrxRequest
from marketplace.monitoring import get_logger
from marketplace.services.trx import TrxService
from marketplace.storage.database import get_db

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def list_trx(
    request: Request,
    pagination: Pagination = Depends(),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 주문 목록 (최신순)"""
    records = await TrxService(session).list(user.id, pagination.limit, pagination.page)
    return success(
        request,
        page_payload([trx_payload(trx) for trx in records], pagination.limit, pagination.page),
    )


@router.get("/{trx_id}")
async def get_trx(
    request: Request,
    trx_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    trx = await TrxService(session).get(user.id, trx_id)
    return success(request, trx_payload(trx))


@router.post("")
async def create_trx(
    request: Request,
    payload: TrxRequest,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """주문 생성"""
    trx = await TrxService(session).create(user.id, payload)
    return success(request, trx.id)
