"""
Enterprise repository for tenant lookups.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.models.enterprise import Enterprise
from bilemo.repositories.base import BaseRepository


class EnterpriseRepository(BaseRepository[Enterprise]):
    """Repository for Enterprise model operations."""

    def __init__(self, session: AsyncSession):
        """Initialize with Enterprise model."""
        super().__init__(Enterprise, session)

    async def get_by_uuid(self, uuid: UUID) -> Enterprise | None:
        """
        Get enterprise by its public UUID.

        Args:
            uuid: Enterprise UUID

        Returns:
            Enterprise instance or None
        """
        query = select(Enterprise).where(Enterprise.uuid == uuid)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def uuid_exists(self, uuid: UUID) -> bool:
        return await self.exists_by_field("uuid", uuid)
