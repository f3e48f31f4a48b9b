"""
회원/상점 저장소
"""

from typing import List, Optional

from sqlalchemy import func, or_, select

from marketplace.storage.base import BaseRepository
from marketplace.storage.tables import Toko, User


class UserRepository(BaseRepository[User]):
    """user 테이블"""

    model = User

    async def find_by_no_telp(self, no_telp: str) -> Optional[User]:
        stmt = select(User).where(User.no_telp == no_telp)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def exists_by_email_or_no_telp(self, email: str, no_telp: str) -> bool:
        """이메일 또는 전화번호 중복 여부"""
        stmt = (
            select(func.count())
            .select_from(User)
            .where(or_(User.email == email, User.no_telp == no_telp))
        )
        return (await self.session.execute(stmt)).scalar_one() > 0


class TokoRepository(BaseRepository[Toko]):
    """toko 테이블"""

    model = Toko

    async def list(self, limit: int, page: int, nama: Optional[str] = None) -> List[Toko]:
        stmt = select(Toko).order_by(Toko.id)
        if nama:
            stmt = stmt.where(Toko.nama_toko.ilike(f"%{nama}%"))
        stmt = stmt.limit(limit).offset(self.offset(limit, page))
        return list((await self.session.execute(stmt)).scalars())

    async def get_by_user(self, user_id: int) -> Optional[Toko]:
        stmt = select(Toko).where(Toko.user_id == user_id)
        return (await self.session.execute(stmt)).scalar_one_or_none()
