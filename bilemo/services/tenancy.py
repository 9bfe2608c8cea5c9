"""
Tenant resolution shared by every service.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.models.enterprise import Enterprise
from bilemo.repositories.enterprise_repository import EnterpriseRepository
from bilemo.core.exceptions import EnterpriseNotFoundException


def parse_enterprise_uuid(identifier: str | UUID) -> UUID:
    """
    Parse the public enterprise key.

    Raises:
        EnterpriseNotFoundException: If the text is not a UUID
    """
    if isinstance(identifier, UUID):
        return identifier
    try:
        return UUID(str(identifier))
    except ValueError:
        raise EnterpriseNotFoundException(identifier=identifier)


class TenantResolver:
    """Looks up the enterprise every scoped request starts from."""

    def __init__(self, session: AsyncSession):
        self.repository = EnterpriseRepository(session)

    async def resolve(self, identifier: str | UUID) -> Enterprise:
        """
        Get enterprise by UUID.

        Args:
            identifier: Enterprise UUID, as text or UUID

        Returns:
            Enterprise instance

        Raises:
            EnterpriseNotFoundException: If the UUID is malformed or unknown
        """
        enterprise = await self.repository.get_by_uuid(parse_enterprise_uuid(identifier))

        if not enterprise:
            raise EnterpriseNotFoundException(identifier=str(identifier))

        return enterprise
