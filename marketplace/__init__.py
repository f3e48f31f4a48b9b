"""
마켓플레이스 REST API
회원, 상점(toko), 상품, 배송지(alamat), 주문(trx) 관리
"""

__version__ = "1.0.0"
