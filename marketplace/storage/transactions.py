"""
주문(trx) 저장소
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from marketplace.storage.base import BaseRepository
from marketplace.storage.tables import DetailTrx, LogProduk, Produk, Trx


class TrxRepository(BaseRepository[Trx]):
    """trx / detail_trx / log_produk 테이블"""

    model = Trx

    @staticmethod
    def _with_relations(stmt):
        log = selectinload(Trx.detail_trx).selectinload(DetailTrx.log_produk)
        return stmt.options(
            selectinload(Trx.alamat),
            selectinload(Trx.detail_trx).selectinload(DetailTrx.toko),
            log.selectinload(LogProduk.toko),
            log.selectinload(LogProduk.category),
            log.selectinload(LogProduk.produk).selectinload(Produk.foto_produk),
        )

    async def list_by_user(self, user_id: int, limit: int, page: int) -> List[Trx]:
        stmt = (
            self._with_relations(select(Trx))
            .where(Trx.user_id == user_id)
            .order_by(Trx.id.desc())
            .limit(limit)
            .offset(self.offset(limit, page))
        )
        return list((await self.session.execute(stmt)).scalars())

    async def get_for_user(self, user_id: int, trx_id: int) -> Optional[Trx]:
        stmt = (
            self._with_relations(select(Trx))
            .where(Trx.user_id == user_id, Trx.id == trx_id)
            .execution_options(populate_existing=True)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def create_with_details(
        self, trx: Trx, logs: List[LogProduk], details: List[DetailTrx]
    ) -> Trx:
        """
        주문, 상품 스냅샷, 주문 항목을 한 번에 기록

        커밋은 호출한 서비스가 수행한다.

        Args:
            trx: 주문
            logs: 항목별 상품 스냅샷
            details: 주문 항목 (logs 와 같은 순서)

        Returns:
            ID 가 확정된 주문
        """
        if len(logs) != len(details):
            raise ValueError("logs and details length mismatch")

        for log, detail in zip(logs, details):
            detail.log_produk = log
            detail.trx = trx

        self.session.add(trx)
        self.session.add_all(logs)
        self.session.add_all(details)
        await self.session.flush()
        return trx
