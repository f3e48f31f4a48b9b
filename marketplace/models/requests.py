"""
요청 본문 모델
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """회원 가입"""

    model_config = ConfigDict(populate_by_name=True)

    nama: Optional[str] = Field(None, description="이름")
    kata_sandi: Optional[str] = Field(None, description="비밀번호")
    no_telp: Optional[str] = Field(None, description="전화번호 (로그인 ID)")
    tanggal_lahir: Optional[str] = Field(None, alias="tanggal_Lahir", description="생년월일 dd/mm/yyyy")
    jenis_kelamin: Optional[str] = Field(None, description="성별")
    tentang: Optional[str] = Field(None, description="자기소개")
    pekerjaan: Optional[str] = Field(None, description="직업")
    email: Optional[str] = Field(None, description="이메일")
    id_provinsi: Optional[str] = Field(None, description="주(province) ID")
    id_kota: Optional[str] = Field(None, description="도시(regency) ID")


class LoginRequest(BaseModel):
    """로그인"""

    no_telp: Optional[str] = None
    kata_sandi: Optional[str] = None


class UpdateUserRequest(BaseModel):
    """회원 정보 수정 (비어 있지 않은 값만 반영)"""

    model_config = ConfigDict(populate_by_name=True)

    nama: Optional[str] = None
    tanggal_lahir: Optional[str] = Field(None, alias="tanggal_Lahir")
    jenis_kelamin: Optional[str] = None
    tentang: Optional[str] = None
    pekerjaan: Optional[str] = None
    id_provinsi: Optional[str] = None
    id_kota: Optional[str] = None


class AlamatRequest(BaseModel):
    """배송지 생성/수정"""

    judul_alamat: Optional[str] = None
    nama_penerima: Optional[str] = None
    no_telp: Optional[str] = None
    detail_alamat: Optional[str] = None


class CategoryRequest(BaseModel):
    """카테고리 생성/수정"""

    nama_category: Optional[str] = None


class DetailTrxRequest(BaseModel):
    """주문 항목"""

    product_id: Optional[int] = None
    kuantitas: int = 0


class TrxRequest(BaseModel):
    """주문 생성"""

    method_bayar: Optional[str] = None
    alamat_kirim: Optional[int] = None
    detail_trx: List[DetailTrxRequest] = Field(default_factory=list)
