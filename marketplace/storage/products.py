"""
상품 저장소
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from marketplace.storage.base import BaseRepository
from marketplace.storage.tables import FotoProduk, Produk


@dataclass
class ProductFilter:
    """상품 목록 필터"""

    nama_produk: Optional[str] = None
    category_id: Optional[int] = None
    toko_id: Optional[int] = None
    min_harga: Optional[int] = None
    max_harga: Optional[int] = None


class ProductRepository(BaseRepository[Produk]):
    """produk / foto_produk 테이블"""

    model = Produk

    @staticmethod
    def _with_relations(stmt):
        return stmt.options(
            selectinload(Produk.toko),
            selectinload(Produk.category),
            selectinload(Produk.foto_produk),
        )

    async def list(self, limit: int, page: int, filters: ProductFilter) -> List[Produk]:
        stmt = self._with_relations(select(Produk)).order_by(Produk.id)

        if filters.nama_produk:
            stmt = stmt.where(Produk.nama_produk.ilike(f"%{filters.nama_produk}%"))
        if filters.category_id:
            stmt = stmt.where(Produk.category_id == filters.category_id)
        if filters.toko_id:
            stmt = stmt.where(Produk.toko_id == filters.toko_id)
        # 가격 필터는 소비자 가격 기준
        if filters.min_harga:
            stmt = stmt.where(Produk.harga_konsumen >= filters.min_harga)
        if filters.max_harga:
            stmt = stmt.where(Produk.harga_konsumen <= filters.max_harga)

        stmt = stmt.limit(limit).offset(self.offset(limit, page))
        return list((await self.session.execute(stmt)).scalars())

    async def get_detail(self, product_id: int) -> Optional[Produk]:
        """연관 데이터(상점, 카테고리, 사진) 포함 조회"""
        stmt = self._with_relations(select(Produk)).where(Produk.id == product_id)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_for_toko(self, toko_id: int, product_id: int) -> Optional[Produk]:
        """특정 상점 소유 상품 조회"""
        stmt = (
            self._with_relations(select(Produk))
            .options(selectinload(Produk.log_produk))
            .where(Produk.id == product_id, Produk.toko_id == toko_id)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_for_update(self, product_id: int) -> Optional[Produk]:
        """재고 차감을 위해 행 잠금 후 조회"""
        stmt = select(Produk).where(Produk.id == product_id).with_for_update()
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def replace_photos(self, product: Produk, urls: List[str]) -> None:
        """기존 사진을 모두 지우고 새 사진으로 교체 (delete-orphan)"""
        product.foto_produk = [FotoProduk(url=url) for url in urls if url]
        await self.session.flush()
