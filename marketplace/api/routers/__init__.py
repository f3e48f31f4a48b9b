"""API 라우터"""

from . import auth, category, product, provcity, toko, trx, users

__all__ = ["auth", "users", "toko", "category", "product", "trx", "provcity"]
