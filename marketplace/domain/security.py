"""
인증 관련 도메인 로직
비밀번호 해시(bcrypt)와 액세스 토큰(JWT) 발급/검증
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from marketplace.config import settings


def hash_password(password: str) -> str:
    """비밀번호를 bcrypt 해시로 변환"""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """평문 비밀번호와 저장된 해시 비교"""
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # 저장된 값이 bcrypt 형식이 아닌 경우
        return False


def create_access_token(
    user_id: int,
    email: str,
    is_admin: bool = False,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    액세스 토큰 생성

    Args:
        user_id: 회원 ID
        email: 회원 이메일
        is_admin: 관리자 여부
        expires_delta: 만료 기간 (기본값: 설정의 jwt_expire_hours)

    Returns:
        HS256 서명된 JWT 문자열
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))

    claims = {
        "id": user_id,
        "email": email,
        "is_admin": is_admin,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    토큰 검증 후 클레임 반환

    Raises:
        jwt.InvalidTokenError: 서명 불일치, 만료, 형식 오류
    """
    claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    if not isinstance(claims.get("id"), int):
        raise jwt.InvalidTokenError("id claim missing")
    return claims
