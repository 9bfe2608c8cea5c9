"""
API router configuration.

Aggregates the enterprise, user and product endpoints into a single router.
"""

from fastapi import APIRouter

from bilemo.api.v1.enterprises import router as enterprises_router
from bilemo.api.v1.users import router as users_router
from bilemo.api.v1.products import router as products_router
from bilemo.schemas.base import ErrorResponse

# Main API router
router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        404: {"model": ErrorResponse, "description": "Not Found"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)

# Resource routes carry their own path prefixes (/enterprise, /users, /user, ...)
router.include_router(enterprises_router, tags=["Enterprise"])
router.include_router(users_router, tags=["User"])
router.include_router(products_router, tags=["Product"])
