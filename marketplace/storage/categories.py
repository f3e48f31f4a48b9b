"""
카테고리 저장소
"""

from typing import List

from sqlalchemy import func, select

from marketplace.storage.base import BaseRepository
from marketplace.storage.tables import Category, LogProduk, Produk


class CategoryRepository(BaseRepository[Category]):
    """category 테이블"""

    model = Category

    async def list(self) -> List[Category]:
        stmt = select(Category).order_by(Category.id)
        return list((await self.session.execute(stmt)).scalars())

    async def count_usage(self, category_id: int) -> int:
        """카테고리를 참조하는 상품 및 주문 스냅샷 수"""
        total = 0
        for table, column in ((Produk, Produk.category_id), (LogProduk, LogProduk.category_id)):
            stmt = select(func.count()).select_from(table).where(column == category_id)
            total += (await self.session.execute(stmt)).scalar_one()
        return total
