"""
카테고리 서비스 (관리자 전용)
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models.requests import CategoryRequest
from marketplace.monitoring import get_logger
from marketplace.services.exceptions import BadRequestError, NotFoundError
from marketplace.storage.categories import CategoryRepository
from marketplace.storage.tables import Category

logger = get_logger(__name__)


class CategoryService:
    """카테고리 관리"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.categories = CategoryRepository(session)

    async def list(self) -> List[Category]:
        return await self.categories.list()

    async def get(self, category_id: int) -> Category:
        category = await self.categories.get(category_id)
        if category is None:
            raise NotFoundError("record not found")
        return category

    async def create(self, payload: CategoryRequest) -> Category:
        nama = (payload.nama_category or "").strip()
        if not nama:
            raise BadRequestError("nama_category wajib diisi")

        category = await self.categories.add(Category(nama=nama))
        await self.session.commit()
        logger.info(f"카테고리 생성: id={category.id}, nama={nama}")
        return category

    async def update(self, category_id: int, payload: CategoryRequest) -> Category:
        category = await self.get(category_id)
        nama = (payload.nama_category or "").strip()
        if not nama:
            raise BadRequestError("nama_category wajib diisi")

        category.nama = nama
        await self.categories.save(category)
        await self.session.commit()
        return category

    async def delete(self, category_id: int) -> None:
        """
        카테고리 삭제

        Raises:
            NotFoundError: 카테고리 없음
            BadRequestError: 상품 또는 주문 스냅샷에서 사용 중
        """
        category = await self.get(category_id)
        if await self.categories.count_usage(category.id) > 0:
            raise BadRequestError("category masih digunakan oleh product")

        await self.categories.delete(category)
        await self.session.commit()
        logger.info(f"카테고리 삭제: id={category_id}")
