"""
서비스 계층 오류
각 오류는 HTTP 상태 코드를 가지며 API 계층에서 응답 형식으로 변환된다.
"""

from typing import List, Optional


class MarketplaceError(Exception):
    """마켓플레이스 기본 오류"""

    status_code = 500
    # 응답 message 를 고정하는 경우 (예: "Unauthorized")
    title: Optional[str] = None

    def __init__(self, *errors: str):
        self.errors: List[str] = [error for error in errors if error]
        super().__init__("; ".join(self.errors) or self.__class__.__name__)


class BadRequestError(MarketplaceError):
    """잘못된 요청"""

    status_code = 400


class ConflictError(BadRequestError):
    """중복 데이터"""


class UnauthorizedError(MarketplaceError):
    """인증 실패"""

    status_code = 401
    title = "Unauthorized"


class InvalidCredentialsError(MarketplaceError):
    """로그인 정보 불일치"""

    status_code = 401


class ForbiddenError(MarketplaceError):
    """권한 없음"""

    status_code = 403
    title = "Forbidden"


class NotFoundError(MarketplaceError):
    """데이터 없음"""

    status_code = 404


class UpstreamError(MarketplaceError):
    """외부 API 오류"""

    status_code = 502
