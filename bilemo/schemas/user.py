"""
User-related Pydantic schemas
"""

from datetime import datetime

from pydantic import Field, EmailStr, field_validator

from bilemo.schemas.base import BaseSchema, EMAIL_MAX_LENGTH, PASSWORD_MAX_BYTES, not_blank


def check_email_length(value: str | None) -> str | None:
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


class UserCreate(BaseSchema):
    """Schema for creating a new user."""

    uuid: str = Field(description="UUID of the owning enterprise")
    firstname: str = Field(
        min_length=1,
        max_length=255,
        description="User's first name"
    )
    lastname: str | None = Field(
        default=None,
        max_length=255,
        description="User's last name"
    )
    email: EmailStr = Field(description="User's email address")
    password: str | None = Field(
        default=None,
        min_length=1,
        description="Plaintext password, hashed before storage"
    )
    available: bool = Field(default=True, description="Availability flag")
    date_of_birth: datetime | None = Field(
        default=None,
        description="Date of birth (defaults to now)"
    )

    @field_validator("firstname")
    @classmethod
    def strip_firstname(cls, v: str) -> str:
        return not_blank(v, "firstname")

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        return check_email_length(v)

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str | None) -> str | None:
        # bcrypt only reads the first 72 bytes
        if v is not None and len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return v


class UserUpdate(BaseSchema):
    """Schema for updating a user."""

    firstname: str | None = Field(default=None, min_length=1, max_length=255)
    lastname: str | None = Field(default=None, max_length=255)
    email: EmailStr | None = Field(default=None)
    available: bool | None = Field(default=None)

    @field_validator("firstname")
    @classmethod
    def strip_firstname(cls, v: str | None) -> str | None:
        return not_blank(v, "firstname")

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str | None) -> str | None:
        return check_email_length(v)


class UserResponse(BaseSchema):
    """User projection returned by every user endpoint."""

    id: int = Field(description="User ID")
    email: str = Field(description="Email")
    firstname: str = Field(description="First name")
    lastname: str | None = Field(default=None, description="Last name")
    date_of_birth: datetime | None = Field(default=None, description="Date of birth")
    available: bool = Field(description="Whether user is available")
