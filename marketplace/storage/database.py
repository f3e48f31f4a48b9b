"""
데이터베이스 연결 및 세션 관리
"""

from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from marketplace.config import settings
from marketplace.monitoring import get_logger
from marketplace.storage.tables import Base

logger = get_logger(__name__)

# 전역 엔진 및 세션 팩토리
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    DB 엔진 반환 (최초 호출 시 생성)

    Returns:
        AsyncEngine 인스턴스
    """
    global _engine
    if _engine is None:
        url = settings.effective_database_url
        options = {"echo": settings.database_echo, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            options["pool_recycle"] = 3600
        _engine = create_async_engine(url, **options)
        logger.info(f"DB 엔진 생성: {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 반환"""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    요청 단위 DB 세션 의존성

    커밋은 각 서비스가 명시적으로 수행하며, 오류 시 롤백한다.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """테이블 생성 (존재하지 않는 테이블만)"""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("DB 테이블 초기화 완료")


async def ping_db(session: AsyncSession) -> bool:
    """DB 연결 확인 (SELECT 1)"""
    await session.execute(text("SELECT 1"))
    return True


async def close_db() -> None:
    """DB 연결 종료"""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
