"""Storage package"""

from marketplace.storage.addresses import AlamatRepository
from marketplace.storage.base import BaseRepository
from marketplace.storage.categories import CategoryRepository
from marketplace.storage.database import close_db, get_db, init_db, ping_db
from marketplace.storage.products import ProductFilter, ProductRepository
from marketplace.storage.transactions import TrxRepository
from marketplace.storage.users import TokoRepository, UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "TokoRepository",
    "AlamatRepository",
    "CategoryRepository",
    "ProductRepository",
    "ProductFilter",
    "TrxRepository",
    "get_db",
    "init_db",
    "ping_db",
    "close_db",
]
