"""
Product-related Pydantic schemas
"""

from datetime import datetime

from pydantic import Field, field_validator

from bilemo.schemas.base import BaseSchema, MAX_PRICE, check_price, not_blank


class ProductCreate(BaseSchema):
    """Schema for creating a new product."""

    uuid: str = Field(description="UUID of the owning enterprise")
    name: str = Field(min_length=1, max_length=255, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: float | None = Field(default=None, ge=0, le=MAX_PRICE, description="Unit price")
    available: bool = Field(default=True, description="Availability flag")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return not_blank(v, "name")

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: float | None) -> float | None:
        return check_price(v)


class ProductUpdate(BaseSchema):
    """Schema for updating a product."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None)
    price: float | None = Field(default=None, ge=0, le=MAX_PRICE)
    available: bool | None = Field(default=None)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return not_blank(v, "name")

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: float | None) -> float | None:
        return check_price(v)


class ProductResponse(BaseSchema):
    """Product projection returned by every product endpoint."""

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: float | None = Field(default=None, description="Unit price")
    created_at: datetime = Field(alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(alias="updatedAt", description="Last update timestamp")
    available: bool = Field(description="Whether product is available")
