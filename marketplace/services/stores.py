"""
상점(toko) 서비스
"""

from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.monitoring import get_logger
from marketplace.services.exceptions import ForbiddenError, NotFoundError
from marketplace.services.uploads import is_present, save_upload
from marketplace.storage.tables import Toko
from marketplace.storage.users import TokoRepository

logger = get_logger(__name__)


class TokoService:
    """상점 조회/수정"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.toko = TokoRepository(session)

    async def list(self, limit: int, page: int, nama: Optional[str] = None) -> List[Toko]:
        return await self.toko.list(limit, page, nama)

    async def get(self, toko_id: int) -> Toko:
        toko = await self.toko.get(toko_id)
        if toko is None:
            raise NotFoundError("record not found")
        return toko

    async def get_my(self, user_id: int) -> Toko:
        toko = await self.toko.get_by_user(user_id)
        if toko is None:
            raise NotFoundError("record not found")
        return toko

    async def update_my(
        self,
        user_id: int,
        nama_toko: Optional[str] = None,
        url_foto: Optional[str] = None,
        photo: Optional[UploadFile] = None,
        toko_id: Optional[int] = None,
    ) -> Toko:
        """
        내 상점 수정

        Args:
            user_id: 요청 회원 ID
            nama_toko: 새 상점명 (비어 있으면 유지)
            url_foto: 새 사진 URL (비어 있으면 유지)
            photo: 업로드 사진 (저장된 파일명이 url_foto 를 대체)
            toko_id: 경로로 지정된 상점 ID

        Raises:
            NotFoundError: 상점 없음
            ForbiddenError: 다른 회원의 상점
        """
        toko = await self.get_my(user_id)
        if toko_id is not None and toko_id != toko.id:
            raise ForbiddenError("toko bukan milik user")

        if nama_toko:
            toko.nama_toko = nama_toko
        if url_foto:
            toko.url_foto = url_foto
        if is_present(photo):
            toko.url_foto = await save_upload(photo)

        await self.toko.save(toko)
        await self.session.commit()
        logger.info(f"상점 수정: toko_id={toko.id}")
        return toko
