"""
User repository for enterprise-scoped user queries.
"""

from typing import List

from sqlalchemy import select, delete, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.models.user import User
from bilemo.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User model operations.

    Every lookup is filtered by the owning enterprise.
    """

    def __init__(self, session: AsyncSession):
        """Initialize with User model."""
        super().__init__(User, session)

    async def get_for_enterprise(self, user_id: int, enterprise_id: int) -> User | None:
        """
        Get a user by ID within an enterprise.

        Args:
            user_id: User ID
            enterprise_id: Owning enterprise ID

        Returns:
            User instance or None
        """
        query = select(User).where(
            and_(
                User.id == user_id,
                User.enterprise_id == enterprise_id,
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_for_enterprise(self, enterprise_id: int) -> List[User]:
        """
        Get every user of an enterprise.

        Args:
            enterprise_id: Owning enterprise ID

        Returns:
            List of users ordered by ID
        """
        return await self.get_many_by_field("enterprise_id", enterprise_id)

    async def email_exists(
        self,
        email: str,
        enterprise_id: int,
        exclude_id: int | None = None,
    ) -> bool:
        """
        Check if an email is already used in an enterprise.

        Args:
            email: Email to check
            enterprise_id: Enterprise ID
            exclude_id: Optional user ID to exclude (for updates)

        Returns:
            True if email exists, False otherwise
        """
        conditions = [
            func.lower(User.email) == email.lower(),
            User.enterprise_id == enterprise_id,
        ]

        if exclude_id is not None:
            conditions.append(User.id != exclude_id)

        query = (
            select(func.count())
            .select_from(User)
            .where(and_(*conditions))
        )

        result = await self.session.execute(query)
        count = result.scalar()

        return count is not None and count > 0

    async def delete_for_enterprise(self, enterprise_id: int) -> int:
        """
        Delete every user of an enterprise.

        Returns:
            Number of deleted rows
        """
        query = delete(User).where(User.enterprise_id == enterprise_id)
        result = await self.session.execute(query)
        await self.session.flush()
        return result.rowcount
