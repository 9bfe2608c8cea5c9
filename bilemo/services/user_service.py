"""
User service for user-related business logic.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.core.exceptions import UserNotFoundException, DuplicateException
from bilemo.core.logging import get_logger
from bilemo.core.security import PasswordHasher, generate_temporary_password, get_password_hasher
from bilemo.models.base import utcnow
from bilemo.models.enterprise import Enterprise
from bilemo.models.user import User, ROLE_USER
from bilemo.repositories.user_repository import UserRepository
from bilemo.schemas.user import UserCreate, UserUpdate
from bilemo.services.tenancy import TenantResolver

logger = get_logger(__name__)


class UserService:
    """
    Service for user business operations.

    Every operation first resolves the owning enterprise, then the user
    inside it.
    """

    def __init__(self, session: AsyncSession, hasher: PasswordHasher | None = None):
        """
        Initialize service with database session.

        Args:
            session: Async database session
            hasher: Credential hasher used for new passwords, defaults to the
                shared one built from settings
        """
        self.session = session
        self.hasher = hasher or get_password_hasher()
        self.repository = UserRepository(session)
        self.tenants = TenantResolver(session)

    async def list(self, enterprise_uuid: str) -> List[User]:
        """
        Get every user of an enterprise.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        return await self.repository.list_for_enterprise(enterprise.id)

    async def get(self, enterprise_uuid: str, user_id: int) -> User:
        """
        Get one user of an enterprise.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            UserNotFoundException: If user not found in that enterprise
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        return await self._get_in(enterprise, user_id)

    async def create(self, data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            data: User creation data, naming the enterprise by UUID

        Returns:
            Created user

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            DuplicateException: If email exists in the enterprise
        """
        enterprise = await self.tenants.resolve(data.uuid)

        if await self.repository.email_exists(data.email, enterprise.id):
            raise DuplicateException(resource="User", field="email")

        password = data.password or generate_temporary_password()

        user = await self.repository.create({
            "enterprise_id": enterprise.id,
            "firstname": data.firstname,
            "lastname": data.lastname,
            "email": data.email.lower(),
            "password": self.hasher.hash(password),
            "roles": [ROLE_USER],
            "date_of_birth": data.date_of_birth or utcnow(),
            "available": data.available,
        })
        await self.session.commit()

        logger.info("User created", user_id=user.id, enterprise_uuid=str(enterprise.uuid))
        return user

    async def update(
        self,
        enterprise_uuid: str,
        user_id: int,
        data: UserUpdate,
    ) -> User:
        """
        Update a user.

        Only fields present in the payload are written.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            UserNotFoundException: If user not found
            DuplicateException: If new email exists in the enterprise
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        user = await self._get_in(enterprise, user_id)

        update_dict = data.model_dump(exclude_unset=True)

        if update_dict.get("email"):
            update_dict["email"] = update_dict["email"].lower()
            if await self.repository.email_exists(
                update_dict["email"],
                enterprise.id,
                exclude_id=user.id,
            ):
                raise DuplicateException(resource="User", field="email")

        user = await self.repository.update(user, update_dict)
        await self.session.commit()

        logger.info(
            "User updated",
            user_id=user.id,
            enterprise_uuid=str(enterprise.uuid),
            fields=sorted(k for k, v in update_dict.items() if v is not None),
        )
        return user

    async def delete(self, enterprise_uuid: str, user_id: int) -> None:
        """
        Delete a user permanently.

        Raises:
            EnterpriseNotFoundException: If enterprise not found
            UserNotFoundException: If user not found
        """
        enterprise = await self.tenants.resolve(enterprise_uuid)
        user = await self._get_in(enterprise, user_id)

        await self.repository.remove(user)
        await self.session.commit()

        logger.info("User deleted", user_id=user_id, enterprise_uuid=str(enterprise.uuid))

    async def _get_in(self, enterprise: Enterprise, user_id: int) -> User:
        user = await self.repository.get_for_enterprise(user_id, enterprise.id)

        if not user:
            raise UserNotFoundException(identifier=user_id)

        return user
