"""
User model, always owned by one enterprise
"""

from datetime import datetime
from typing import List

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from bilemo.models.base import Base, IntegerIDMixin, utcnow


# Role assigned to every user at creation
ROLE_USER = "ROLE_USER"


def default_roles() -> List[str]:
    return [ROLE_USER]


class User(Base, IntegerIDMixin):
    """
    User model scoped to an enterprise.

    The password column only ever holds a hash.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index("ix_users_enterprise_email", "enterprise_id", "email", unique=True),
    )

    enterprise_id: Mapped[int] = mapped_column(
        ForeignKey("enterprises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    firstname: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    lastname: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    email: Mapped[str] = mapped_column(
        String(180),
        nullable=False,
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    roles: Mapped[List[str]] = mapped_column(
        JSON,
        default=default_roles,
        nullable=False,
    )

    date_of_birth: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=True,
    )

    available: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', enterprise_id={self.enterprise_id})>"
