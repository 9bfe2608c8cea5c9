"""
Pydantic schemas for request/response validation
"""

from bilemo.schemas.base import BaseSchema, ErrorResponse, FieldError
from bilemo.schemas.enterprise import EnterpriseCreate, EnterpriseResponse
from bilemo.schemas.user import UserCreate, UserUpdate, UserResponse
from bilemo.schemas.product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "BaseSchema",
    "ErrorResponse",
    "FieldError",
    "EnterpriseCreate",
    "EnterpriseResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
