"""User management schemas (admin endpoints). Password hashes never leave the service."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stock_api.core.security import (
    EMAIL_MAX_LEN,
    EMAIL_PATTERN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    normalize_email,
)
from stock_api.models.user import Role


class UserCreate(BaseModel):
    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = Role.USER

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v


class UserUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str | None = Field(default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role | None = None

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v

    @field_validator("username", "email", "password", "role")
    @classmethod
    def not_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime
