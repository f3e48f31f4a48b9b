"""
저장소 기본 클래스
SQLAlchemy AsyncSession 위에서 동작하는 공통 CRUD
"""

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.storage.tables import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """테이블 하나에 대한 저장소"""

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, record_id: int) -> Optional[ModelT]:
        """
        기본 키로 조회

        Args:
            record_id: 레코드 ID

        Returns:
            레코드 또는 None
        """
        return await self.session.get(self.model, record_id)

    async def add(self, record: ModelT) -> ModelT:
        """레코드 추가 후 flush 하여 ID 확정"""
        self.session.add(record)
        await self.session.flush()
        return record

    async def save(self, record: ModelT) -> ModelT:
        """변경 사항 flush"""
        await self.session.flush()
        return record

    async def delete(self, record: ModelT) -> None:
        """레코드 삭제"""
        await self.session.delete(record)
        await self.session.flush()

    @staticmethod
    def offset(limit: int, page: int) -> int:
        """페이지 번호를 offset 으로 변환"""
        return (page - 1) * limit
