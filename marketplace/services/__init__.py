"""
서비스 계층
요청 검증, 비즈니스 규칙 적용, 트랜잭션 경계
"""

from marketplace.services.addresses import AlamatService
from marketplace.services.auth import AuthService
from marketplace.services.categories import CategoryService
from marketplace.services.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    MarketplaceError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
)
from marketplace.services.products import ProductForm, ProductService
from marketplace.services.region import RegionClient
from marketplace.services.stores import TokoService
from marketplace.services.trx import TrxService
from marketplace.services.users import UserService

__all__ = [
    "AuthService",
    "UserService",
    "AlamatService",
    "TokoService",
    "CategoryService",
    "ProductService",
    "ProductForm",
    "TrxService",
    "RegionClient",
    "MarketplaceError",
    "BadRequestError",
    "ConflictError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "NotFoundError",
    "UpstreamError",
]
