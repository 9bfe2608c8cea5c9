"""
Enterprise-related Pydantic schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from bilemo.schemas.base import BaseSchema


class EnterpriseCreate(BaseSchema):
    """Schema for creating a new enterprise."""

    name: str = Field(
        min_length=1,
        max_length=255,
        description="The name of the enterprise"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Missing required field: name")
        return v


class EnterpriseResponse(BaseSchema):
    """Enterprise response schema."""

    id: int = Field(description="Internal identifier")
    uuid: UUID = Field(description="Public enterprise UUID")
    name: str | None = Field(default=None, description="Display name")
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
        description="Creation timestamp",
    )
