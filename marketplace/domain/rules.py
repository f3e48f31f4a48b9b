"""
비즈니스 규칙
슬러그, 인보이스 코드, 날짜 형식, 업로드 파일명
"""

import time
from datetime import date, datetime
from pathlib import Path
from typing import Optional

# tanggal_Lahir 입출력 형식
DATE_FORMAT = "%d/%m/%Y"

# 정수 컬럼 범위 (Integer / BigInteger)
MAX_INT = 2**31 - 1
MAX_BIGINT = 2**63 - 1

# 상품 가격 상한 (루피아)
MAX_HARGA = 10**12


def make_slug(name: str) -> str:
    """상품명으로 슬러그 생성 (소문자, 공백 -> '-')"""
    return name.strip().lower().replace(" ", "-")


def make_invoice_code(timestamp: Optional[float] = None) -> str:
    """인보이스 코드 생성 (INV-<유닉스 초>)"""
    if timestamp is None:
        timestamp = time.time()
    return f"INV-{int(timestamp)}"


def parse_tanggal(value: Optional[str]) -> Optional[date]:
    """
    dd/mm/yyyy 문자열을 날짜로 변환

    Args:
        value: 날짜 문자열 (비어 있으면 None)

    Returns:
        date 또는 None

    Raises:
        ValueError: 형식이 맞지 않는 경우
    """
    if value is None or not value.strip():
        return None
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def format_tanggal(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def upload_filename(original: str) -> str:
    """업로드 파일 저장명 (<나노초>-<원본 파일명>)"""
    return f"{time.time_ns()}-{Path(original).name}"
