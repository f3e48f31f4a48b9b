"""
회원 가입 / 로그인 API
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.responses import success
from marketplace.models.requests import LoginRequest, RegisterRequest
from marketplace.monitoring import get_logger
from marketplace.services.auth import AuthService
from marketplace.storage.database import get_db

logger = get_logger(__name__)

router = APIRouter()


@router.post("/register")
async def register(request: Request, payload: RegisterRequest, session: AsyncSession = Depends(get_db)):
    """회원 가입 (상점 자동 생성)"""
    await AuthService(session).register(payload)
    return success(request, "Register Succeed")


@router.post("/login")
async def login(request: Request, payload: LoginRequest, session: AsyncSession = Depends(get_db)):
    """로그인 후 토큰 발급"""
    data = await AuthService(session).login(payload)
    return success(request, data)
