"""
SQLAlchemy models for the multi-tenant application
"""

from bilemo.models.base import Base, IntegerIDMixin, TimestampMixin
from bilemo.models.enterprise import Enterprise
from bilemo.models.user import User, ROLE_USER
from bilemo.models.product import Product

__all__ = [
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    "Enterprise",
    "User",
    "ROLE_USER",
    "Product",
]
