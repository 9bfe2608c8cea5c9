"""
Product service for product-related business logic.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.core.exceptions import ProductNotFoundException
from bilemo.core.logging import get_logger
from bilemo.models.base import utcnow
from bilemo.models.enterprise import Enterprise
from bilemo.models.product import Product
from bilemo.repositories.product_repository import ProductRepository
from bilemo.schemas.product import ProductCreate, ProductUpdate
from bilemo.services.tenancy import TenantResolver

logger = get_logger(__name__)


class ProductService:
    """Service for enterprise-scoped product operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = ProductRepository(session)
        self.tenants = TenantResolver(session)

    async def list(self, enterprise_uuid: str) -> List[Product]:
        enterprise = await self.tenants.resolve(enterprise_uuid)
        return await self.repository.list_for_enterprise(enterprise.id)

    async def get(self, enterprise_uuid: str, product_id: int) -> Product:
        enterprise = await self.tenants.resolve(enterprise_uuid)
        return await self._get_in(enterprise, product_id)

    async def create(self, data: ProductCreate) -> Product:
        """
        Create a new product for the enterprise named in the payload.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
        """
        enterprise = await self.tenants.resolve(data.uuid)

        now = utcnow()
        product = await self.repository.create({
            "enterprise_id": enterprise.id,
            "name": data.name,
            "description": data.description,
            "price": data.price,
            "available": data.available,
            "created_at": now,
            "updated_at": now,
        })
        await self.session.commit()

        logger.info("Product created", product_id=product.id, enterprise_uuid=str(enterprise.uuid))
        return product

    async def update(
        self,
        enterprise_uuid: str,
        product_id: int,
        data: ProductUpdate,
    ) -> Product:
        """
        Update a product, writing only the fields present in the payload.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            ProductNotFoundException: If product not found
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        product = await self._get_in(enterprise, product_id)

        update_dict = data.model_dump(exclude_unset=True)
        product = await self.repository.update(product, update_dict)
        await self.session.commit()

        logger.info("Product updated", product_id=product.id, enterprise_uuid=str(enterprise.uuid))
        return product

    async def delete(self, enterprise_uuid: str, product_id: int) -> None:
        """
        Delete a product permanently.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            ProductNotFoundException: If product not found
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        product = await self._get_in(enterprise, product_id)

        await self.repository.remove(product)
        await self.session.commit()

        logger.info("Product deleted", product_id=product_id, enterprise_uuid=str(enterprise.uuid))

    async def _get_in(self, enterprise: Enterprise, product_id: int) -> Product:
        product = await self.repository.get_for_enterprise(product_id, enterprise.id)

        if not product:
            raise ProductNotFoundException(identifier=product_id)

        return product
