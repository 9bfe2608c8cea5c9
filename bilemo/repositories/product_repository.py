"""
Product repository for enterprise-scoped product queries.
"""

from typing import List

from sqlalchemy import select, delete, and_
from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.models.product import Product
from bilemo.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for Product model operations."""

    def __init__(self, session: AsyncSession):
        """Initialize with Product model."""
        super().__init__(Product, session)

    async def get_for_enterprise(self, product_id: int, enterprise_id: int) -> Product | None:
        """
        Get a product by ID within an enterprise.

        Args:
            product_id: Product ID
            enterprise_id: Owning enterprise ID

        Returns:
            Product instance or None
        """
        query = select(Product).where(
            and_(
                Product.id == product_id,
                Product.enterprise_id == enterprise_id,
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_for_enterprise(self, enterprise_id: int) -> List[Product]:
        return await self.get_many_by_field("enterprise_id", enterprise_id)

    async def delete_for_enterprise(self, enterprise_id: int) -> int:
        query = delete(Product).where(Product.enterprise_id == enterprise_id)
        result = await self.session.execute(query)
        await self.session.flush()
        return result.rowcount
