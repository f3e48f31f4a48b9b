"""
회원 가입 / 로그인
"""

from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.rules import parse_tanggal
from marketplace.domain.security import create_access_token, hash_password, verify_password
from marketplace.models.payloads import user_payload
from marketplace.models.requests import LoginRequest, RegisterRequest
from marketplace.monitoring import get_logger, global_metrics
from marketplace.services.exceptions import (
    BadRequestError,
    ConflictError,
    InvalidCredentialsError,
)
from marketplace.storage.tables import Toko, User
from marketplace.storage.users import UserRepository

logger = get_logger(__name__)

DUPLICATE_MESSAGE = "email atau no_telp sudah digunakan"
INVALID_CREDENTIALS_MESSAGE = "No Telp atau kata sandi salah"

# bcrypt 는 72 바이트를 넘는 비밀번호를 해시하지 않는다
MAX_PASSWORD_BYTES = 72


class AuthService:
    """회원 가입 및 토큰 발급"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    async def register(self, payload: RegisterRequest) -> User:
        """
        회원 가입

        회원과 "<이름> Store" 상점을 하나의 트랜잭션으로 생성한다.

        Args:
            payload: 가입 정보

        Returns:
            생성된 회원

        Raises:
            BadRequestError: 필수 값 누락, 72 바이트를 넘는 비밀번호
            ConflictError: 이메일 또는 전화번호 중복
        """
        missing = [
            field
            for field in ("nama", "kata_sandi", "no_telp", "email")
            if not (getattr(payload, field) or "").strip()
        ]
        if missing:
            raise BadRequestError(*[f"{field} wajib diisi" for field in missing])

        if len(payload.kata_sandi.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise BadRequestError(f"kata_sandi maksimal {MAX_PASSWORD_BYTES} byte")

        if await self.users.exists_by_email_or_no_telp(payload.email, payload.no_telp):
            raise ConflictError(DUPLICATE_MESSAGE)

        # 형식이 맞지 않는 생년월일은 무시
        try:
            tanggal_lahir = parse_tanggal(payload.tanggal_lahir)
        except ValueError:
            logger.debug(f"생년월일 형식 오류 무시: {payload.tanggal_lahir!r}")
            tanggal_lahir = None

        user = User(
            nama=payload.nama,
            kata_sandi=hash_password(payload.kata_sandi),
            no_telp=payload.no_telp,
            tanggal_lahir=tanggal_lahir,
            jenis_kelamin=payload.jenis_kelamin,
            tentang=payload.tentang,
            pekerjaan=payload.pekerjaan,
            email=payload.email,
            id_provinsi=payload.id_provinsi,
            id_kota=payload.id_kota,
            is_admin=False,
        )
        user.toko = Toko(nama_toko=f"{payload.nama} Store")

        try:
            await self.users.add(user)
            await self.session.commit()
        except IntegrityError as e:
            # 동시 가입으로 unique 제약 위반
            await self.session.rollback()
            raise ConflictError(DUPLICATE_MESSAGE) from e

        global_metrics.increment("users.registered")
        logger.info(f"회원 가입: user_id={user.id}, toko_id={user.toko.id}")
        return user

    async def login(self, payload: LoginRequest) -> Dict[str, Any]:
        """
        로그인

        Returns:
            회원 정보 + token

        Raises:
            InvalidCredentialsError: 전화번호 또는 비밀번호 불일치
        """
        if not payload.no_telp or not payload.kata_sandi:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        user = await self.users.find_by_no_telp(payload.no_telp)
        if user is None or not verify_password(payload.kata_sandi, user.kata_sandi):
            logger.warning(f"로그인 실패: no_telp={payload.no_telp}")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        token = create_access_token(user.id, user.email, user.is_admin)
        logger.info(f"로그인: user_id={user.id}")

        data = user_payload(user, with_id=False)
        data.pop("jenis_kelamin")
        data["token"] = token
        return data
