"""
Enterprise model, the tenant of the API
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from bilemo.models.base import Base, IntegerIDMixin, utcnow


class Enterprise(Base, IntegerIDMixin):
    """
    Enterprise model representing a tenant.

    Users and products reference an enterprise by foreign key; the
    enterprise itself keeps no child collections, they are queried
    on demand.
    """

    __tablename__ = "enterprises"
    __table_args__ = (
        Index("ix_enterprises_uuid", "uuid", unique=True),
    )

    # Public lookup key, never reassigned
    uuid: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        nullable=False,
        default=uuid4,
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Enterprise(id={self.id}, uuid='{self.uuid}', name='{self.name}')>"
