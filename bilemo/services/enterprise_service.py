"""
Enterprise service for tenant-related business logic.
"""

from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.core.logging import get_logger
from bilemo.models.base import utcnow
from bilemo.models.enterprise import Enterprise
from bilemo.repositories.enterprise_repository import EnterpriseRepository
from bilemo.repositories.product_repository import ProductRepository
from bilemo.repositories.user_repository import UserRepository
from bilemo.schemas.enterprise import EnterpriseCreate
from bilemo.services.tenancy import TenantResolver

logger = get_logger(__name__)


class EnterpriseService:
    """
    Service for enterprise business operations.

    Enterprises are addressed by their UUID, never by the numeric id.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize service with database session.

        Args:
            session: Async database session
        """
        self.session = session
        self.repository = EnterpriseRepository(session)
        self.tenants = TenantResolver(session)

    async def get(self, uuid: str) -> Enterprise:
        """
        Get enterprise by UUID.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
        """
        return await self.tenants.resolve(uuid)

    async def create(self, data: EnterpriseCreate) -> Enterprise:
        """
        Create a new enterprise with a fresh version-4 UUID.

        Args:
            data: Enterprise creation data

        Returns:
            Created enterprise
        """
        uuid = uuid4()
        while await self.repository.uuid_exists(uuid):
            uuid = uuid4()

        enterprise = await self.repository.create({
            "name": data.name,
            "uuid": uuid,
            "created_at": utcnow(),
        })
        await self.session.commit()

        logger.info("Enterprise created", enterprise_id=enterprise.id, uuid=str(enterprise.uuid))
        return enterprise

    async def delete(self, uuid: str) -> None:
        """
        Delete an enterprise together with its users and products.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
        """
        enterprise = await self.tenants.resolve(uuid)

        products = await ProductRepository(self.session).delete_for_enterprise(enterprise.id)
        users = await UserRepository(self.session).delete_for_enterprise(enterprise.id)
        await self.repository.remove(enterprise)
        await self.session.commit()

        logger.info(
            "Enterprise deleted",
            enterprise_id=enterprise.id,
            uuid=str(enterprise.uuid),
            users_deleted=users,
            products_deleted=products,
        )
