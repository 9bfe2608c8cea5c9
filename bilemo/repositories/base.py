"""
Base repository with common CRUD operations.

Provides generic database operations that can be inherited
by specific entity repositories.
"""

from typing import Any, Generic, List, Type, TypeVar

from sqlalchemy import select, delete, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from bilemo.models.base import Base

# Type variable for generic model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.

    Attributes:
        model: SQLAlchemy model class
        session: Async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """
        Get a single record by ID.

        Args:
            id: Record primary key

        Returns:
            Model instance or None if not found
        """
        query = select(self.model).where(self.model.id == id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_field(self, field_name: str, value: Any) -> ModelType | None:
        """
        Get a single record by field value.

        Args:
            field_name: Name of the field to filter by
            value: Value to match

        Returns:
            Model instance or None if not found
        """
        field = self._field(field_name)
        query = select(self.model).where(field == value)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_many_by_field(self, field_name: str, value: Any) -> List[ModelType]:
        """
        Get every record whose field matches a value, ordered by ID.

        Args:
            field_name: Name of the field to filter by
            value: Value to match

        Returns:
            List of model instances
        """
        field = self._field(field_name)
        query = (
            select(self.model)
            .where(field == value)
            .order_by(self.model.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(self, obj_data: dict[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            obj_data: Dictionary of field values

        Returns:
            Created model instance
        """
        db_obj = self.model(**obj_data)
        self.session.add(db_obj)
        await self.session.flush()
        await self.session.refresh(db_obj)
        return db_obj

    async def update(self, db_obj: ModelType, obj_data: dict[str, Any]) -> ModelType:
        """
        Merge fields into a loaded record.

        Args:
            db_obj: Instance to update
            obj_data: Dictionary of fields to update

        Returns:
            Updated model instance
        """
        # Remove None values to avoid overwriting with null
        update_data = {k: v for k, v in obj_data.items() if v is not None}

        if not update_data:
            return db_obj

        for field_name, value in update_data.items():
            setattr(db_obj, field_name, value)

        await self.session.flush()
        await self.session.refresh(db_obj)
        return db_obj

    async def remove(self, db_obj: ModelType) -> None:
        """
        Delete a loaded record.

        Args:
            db_obj: Instance to delete
        """
        await self.session.delete(db_obj)
        await self.session.flush()

    async def delete(self, id: int) -> bool:
        """
        Delete a record by ID.

        Args:
            id: Record primary key

        Returns:
            True if deleted, False if not found
        """
        query = delete(self.model).where(self.model.id == id)
        result = await self.session.execute(query)
        await self.session.flush()

        return result.rowcount > 0

    async def exists_by_field(self, field_name: str, value: Any) -> bool:
        """
        Check if a record exists by field value.

        Args:
            field_name: Name of the field to check
            value: Value to match

        Returns:
            True if exists, False otherwise
        """
        field = self._field(field_name)
        query = select(func.count()).select_from(self.model).where(field == value)
        result = await self.session.execute(query)
        count = result.scalar()

        return count is not None and count > 0

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """
        Count records with optional filters.

        Args:
            filters: Optional dictionary of field filters

        Returns:
            Number of matching records
        """
        query = select(func.count()).select_from(self.model)

        if filters:
            conditions = [self._field(name) == value for name, value in filters.items()]
            query = query.where(and_(*conditions))

        result = await self.session.execute(query)
        count = result.scalar()

        return count or 0

    def _field(self, field_name: str):
        field = getattr(self.model, field_name, None)
        if field is None:
            raise ValueError(f"Field '{field_name}' does not exist on {self.model.__name__}")
        return field
