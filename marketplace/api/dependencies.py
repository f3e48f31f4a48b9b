"""
API 의존성 주입
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, Header, Query

from marketplace.domain.rules import MAX_BIGINT, MAX_INT
from marketplace.domain.security import decode_access_token
from marketplace.monitoring import get_logger
from marketplace.services.exceptions import ForbiddenError, UnauthorizedError

logger = get_logger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


@dataclass
class CurrentUser:
    """토큰에서 꺼낸 회원 정보"""

    id: int
    email: str
    is_admin: bool = False


async def get_current_user(
    token: Optional[str] = Header(None, description="액세스 토큰"),
    authorization: Optional[str] = Header(None),
) -> CurrentUser:
    """
    현재 회원 반환

    `token` 헤더를 우선 사용하고, 없으면 `Authorization: Bearer` 를 사용한다.
    """
    raw = token
    if not raw and authorization and authorization.lower().startswith("bearer "):
        raw = authorization[7:].strip()

    if not raw:
        raise UnauthorizedError("missing token")

    try:
        claims = decode_access_token(raw)
    except jwt.InvalidTokenError as e:
        logger.debug(f"토큰 검증 실패: {e}")
        raise UnauthorizedError("invalid token") from e

    return CurrentUser(
        id=claims["id"],
        email=claims.get("email", ""),
        is_admin=bool(claims.get("is_admin", False)),
    )


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """관리자 권한 요구"""
    if not user.is_admin:
        raise ForbiddenError("admin only")
    return user


def parse_optional_int(value: Optional[str]) -> Optional[int]:
    """숫자로 변환할 수 없거나 64비트 범위를 벗어난 값은 None"""
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    if abs(number) > MAX_BIGINT:
        return None
    return number


class Pagination:
    """페이지네이션 파라미터 (범위를 벗어나거나 잘못된 값은 기본값)"""

    def __init__(
        self,
        limit: Optional[str] = Query(None, description="페이지 크기"),
        page: Optional[str] = Query(None, description="페이지 번호"),
    ):
        limit_value = parse_optional_int(limit)
        page_value = parse_optional_int(page)
        self.limit = limit_value if limit_value and 0 < limit_value <= MAX_INT else DEFAULT_LIMIT
        self.page = page_value if page_value and 0 < page_value <= MAX_INT else DEFAULT_PAGE
