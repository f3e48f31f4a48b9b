"""
회원 정보 서비스
"""

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.rules import parse_tanggal
from marketplace.models.requests import UpdateUserRequest
from marketplace.monitoring import get_logger
from marketplace.services.exceptions import BadRequestError, NotFoundError
from marketplace.storage.tables import User
from marketplace.storage.users import UserRepository

logger = get_logger(__name__)

# 비어 있지 않은 값만 덮어쓰는 필드
UPDATABLE_FIELDS = ("nama", "jenis_kelamin", "tentang", "pekerjaan", "id_provinsi", "id_kota")


class UserService:
    """내 정보 조회/수정"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    async def get_profile(self, user_id: int) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    async def update_profile(self, user_id: int, payload: UpdateUserRequest) -> User:
        """
        내 정보 부분 수정

        Raises:
            NotFoundError: 회원 없음
            BadRequestError: 생년월일 형식 오류
        """
        user = await self.get_profile(user_id)

        for field in UPDATABLE_FIELDS:
            value = getattr(payload, field)
            if value:
                setattr(user, field, value)

        if payload.tanggal_lahir:
            try:
                user.tanggal_lahir = parse_tanggal(payload.tanggal_lahir)
            except ValueError as e:
                raise BadRequestError("invalid tanggal_Lahir, format dd/mm/yyyy") from e

        await self.users.save(user)
        await self.session.commit()
        logger.info(f"회원 정보 수정: user_id={user_id}")
        return user
