"""
API Version 1 module.

Contains the enterprise, user and product endpoints.
"""

from bilemo.api.v1.router import router
from bilemo.api.v1.enterprises import router as enterprises_router
from bilemo.api.v1.users import router as users_router
from bilemo.api.v1.products import router as products_router

__all__ = [
    "router",
    "enterprises_router",
    "users_router",
    "products_router",
]
