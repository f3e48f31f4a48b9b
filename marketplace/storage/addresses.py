"""
배송지 저장소
"""

from typing import List, Optional

from sqlalchemy import func, select

from marketplace.storage.base import BaseRepository
from marketplace.storage.tables import Alamat, Trx


class AlamatRepository(BaseRepository[Alamat]):
    """alamat 테이블 (항상 소유자 기준으로 조회)"""

    model = Alamat

    async def list_by_user(self, user_id: int, judul: Optional[str] = None) -> List[Alamat]:
        stmt = select(Alamat).where(Alamat.user_id == user_id).order_by(Alamat.id)
        if judul:
            stmt = stmt.where(Alamat.judul_alamat.ilike(f"%{judul}%"))
        return list((await self.session.execute(stmt)).scalars())

    async def get_for_user(self, user_id: int, alamat_id: int) -> Optional[Alamat]:
        stmt = select(Alamat).where(Alamat.user_id == user_id, Alamat.id == alamat_id)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def is_used_by_trx(self, alamat_id: int) -> bool:
        """주문에서 참조 중인지 여부"""
        stmt = select(func.count()).select_from(Trx).where(Trx.alamat_id == alamat_id)
        return (await self.session.execute(stmt)).scalar_one() > 0
