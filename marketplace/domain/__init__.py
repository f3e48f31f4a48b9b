"""
도메인 로직 모듈
비즈니스 규칙과 인증 로직을 담당
"""

from marketplace.domain.rules import (
    MAX_BIGINT,
    MAX_HARGA,
    MAX_INT,
    format_tanggal,
    make_invoice_code,
    make_slug,
    parse_tanggal,
    upload_filename,
)
from marketplace.domain.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

__all__ = [
    "MAX_INT",
    "MAX_BIGINT",
    "MAX_HARGA",
    "make_slug",
    "make_invoice_code",
    "parse_tanggal",
    "format_tanggal",
    "upload_filename",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
