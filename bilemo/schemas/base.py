"""
Base Pydantic schemas and common types
"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# Column limits shared by request schemas and path parameters
MAX_ID = 2_147_483_647
MAX_PRICE = 99_999_999.99
EMAIL_MAX_LENGTH = 180
PASSWORD_MAX_BYTES = 72


def not_blank(value: str | None, field_name: str) -> str | None:
    """Strip a text field and reject it when nothing is left."""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} must not be blank")
    return value


def check_price(value: float | None) -> float | None:
    """Reject prices with more than two decimal places."""
    if value is not None and Decimal(str(value)).as_tuple().exponent < -2:
        raise ValueError("price must have at most 2 decimal places")
    return value


class FieldError(BaseSchema):
    """One invalid request field."""

    field: str = Field(description="Dotted location of the field")
    message: str = Field(description="What is wrong with it")
    type: str = Field(description="Error type")


class ErrorResponse(BaseSchema):
    """Error response schema."""

    success: bool = Field(default=False)
    error: str = Field(description="Error detail message")
    status_code: int = Field(description="HTTP status code")
    errors: List[FieldError] | None = Field(default=None, description="Field errors")
