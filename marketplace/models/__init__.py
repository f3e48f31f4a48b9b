"""
요청/응답 모델
"""

from marketplace.models.requests import (
    AlamatRequest,
    CategoryRequest,
    DetailTrxRequest,
    LoginRequest,
    RegisterRequest,
    TrxRequest,
    UpdateUserRequest,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UpdateUserRequest",
    "AlamatRequest",
    "CategoryRequest",
    "DetailTrxRequest",
    "TrxRequest",
]
