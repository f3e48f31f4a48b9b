"""
비즈니스 규칙 테스트
"""

import re
from datetime import date

import pytest

from marketplace.domain.rules import (
    format_tanggal,
    make_invoice_code,
    make_slug,
    parse_tanggal,
    upload_filename,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Kabel Data USB", "kabel-data-usb"),
        ("  Sepatu Lari  ", "sepatu-lari"),
        ("KAOS", "kaos"),
    ],
)
def test_make_slug(name, expected):
    """슬러그 생성"""
    assert make_slug(name) == expected


def test_make_invoice_code():
    assert make_invoice_code(1700000000.9) == "INV-1700000000"
    assert re.fullmatch(r"INV-\d+", make_invoice_code())


class TestTanggal:
    """생년월일 형식 테스트"""

    def test_parse(self):
        assert parse_tanggal("17/08/1995") == date(1995, 8, 17)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_parse_empty(self, value):
        assert parse_tanggal(value) is None

    @pytest.mark.parametrize("value", ["1995-08-17", "32/01/2000", "abc"])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_tanggal(value)

    def test_format(self):
        assert format_tanggal(date(2001, 2, 3)) == "03/02/2001"
        assert format_tanggal(None) is None


def test_upload_filename_strips_directories():
    """경로가 포함된 파일명은 파일명만 사용"""
    name = upload_filename("../../etc/foto.jpg")

    assert re.fullmatch(r"\d+-foto\.jpg", name)
