"""
Service layer for business logic.

Services orchestrate operations between repositories
and handle business rules and validation.
"""

from bilemo.services.tenancy import TenantResolver, parse_enterprise_uuid
from bilemo.services.enterprise_service import EnterpriseService
from bilemo.services.user_service import UserService
from bilemo.services.product_service import ProductService

__all__ = [
    "TenantResolver",
    "parse_enterprise_uuid",
    "EnterpriseService",
    "UserService",
    "ProductService",
]
