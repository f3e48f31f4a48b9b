"""
카테고리 API (관리자 전용)
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.dependencies import require_admin
from marketplace.api.responses import success
from marketplace.models.payloads import category_payload
from marketplace.models.requests import CategoryRequest
from marketplace.monitoring import get_logger
from marketplace.services.categories import CategoryService
from marketplace.storage.database import get_db

logger = get_logger(__name__)

# 모든 경로에 관리자 권한 필요
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def list_categories(request: Request, session: AsyncSession = Depends(get_db)):
    records = await CategoryService(session).list()
    return success(request, [category_payload(category) for category in records])


@router.get("/{category_id}")
async def get_category(request: Request, category_id: int, session: AsyncSession = Depends(get_db)):
    category = await CategoryService(session).get(category_id)
    return success(request, category_payload(category))


@router.post("")
async def create_category(
    request: Request, payload: CategoryRequest, session: AsyncSession = Depends(get_db)
):
    """카테고리 생성"""
    category = await CategoryService(session).create(payload)
    return success(request, category_payload(category), status_code=status.HTTP_201_CREATED)


@router.put("/{category_id}")
async def update_category(
    request: Request,
    category_id: int,
    payload: CategoryRequest,
    session: AsyncSession = Depends(get_db),
):
    category = await CategoryService(session).update(category_id, payload)
    return success(request, category_payload(category))


@router.delete("/{category_id}")
async def delete_category(request: Request, category_id: int, session: AsyncSession = Depends(get_db)):
    """카테고리 삭제 (사용 중이면 400)"""
    await CategoryService(session).delete(category_id)
    return success(request, "")
