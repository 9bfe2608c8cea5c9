"""
Repository layer for data access.

Repositories handle all database operations and provide
a clean abstraction over SQLAlchemy queries.
"""

from bilemo.repositories.base import BaseRepository
from bilemo.repositories.enterprise_repository import EnterpriseRepository
from bilemo.repositories.user_repository import UserRepository
from bilemo.repositories.product_repository import ProductRepository

__all__ = [
    "BaseRepository",
    "EnterpriseRepository",
    "UserRepository",
    "ProductRepository",
]
