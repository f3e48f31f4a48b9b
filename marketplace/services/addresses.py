"""
배송지 서비스
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models.requests import AlamatRequest
from marketplace.monitoring import get_logger
from marketplace.services.exceptions import BadRequestError, NotFoundError
from marketplace.storage.addresses import AlamatRepository
from marketplace.storage.tables import Alamat

logger = get_logger(__name__)

ALAMAT_FIELDS = ("judul_alamat", "nama_penerima", "no_telp", "detail_alamat")


class AlamatService:
    """본인 배송지 관리"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.alamat = AlamatRepository(session)

    async def list(self, user_id: int, judul: Optional[str] = None) -> List[Alamat]:
        return await self.alamat.list_by_user(user_id, judul)

    async def get(self, user_id: int, alamat_id: int) -> Alamat:
        alamat = await self.alamat.get_for_user(user_id, alamat_id)
        if alamat is None:
            raise NotFoundError("record not found")
        return alamat

    async def create(self, user_id: int, payload: AlamatRequest) -> Alamat:
        """배송지 등록 (모든 필드 필수)"""
        missing = [field for field in ALAMAT_FIELDS if not (getattr(payload, field) or "").strip()]
        if missing:
            raise BadRequestError(*[f"{field} wajib diisi" for field in missing])

        alamat = Alamat(user_id=user_id, **{field: getattr(payload, field) for field in ALAMAT_FIELDS})
        await self.alamat.add(alamat)
        await self.session.commit()
        logger.info(f"배송지 등록: user_id={user_id}, alamat_id={alamat.id}")
        return alamat

    async def update(self, user_id: int, alamat_id: int, payload: AlamatRequest) -> Alamat:
        alamat = await self.get(user_id, alamat_id)
        for field in ALAMAT_FIELDS:
            value = getattr(payload, field)
            if value:
                setattr(alamat, field, value)

        await self.alamat.save(alamat)
        await self.session.commit()
        return alamat

    async def delete(self, user_id: int, alamat_id: int) -> None:
        """
        배송지 삭제

        Raises:
            NotFoundError: 본인 배송지가 아님
            BadRequestError: 주문에서 사용 중
        """
        alamat = await self.get(user_id, alamat_id)
        if await self.alamat.is_used_by_trx(alamat.id):
            raise BadRequestError("alamat digunakan oleh trx")

        await self.alamat.delete(alamat)
        await self.session.commit()
        logger.info(f"배송지 삭제: user_id={user_id}, alamat_id={alamat_id}")
