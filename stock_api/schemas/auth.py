"""Request/response schemas for auth endpoints."""

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


class RegisterRequest(BaseModel):
    """New account credentials. Registered users always get the default role."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v


class RegisterResponse(BaseModel):
    message: str
    id: int


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        return normalize_email(v) if isinstance(v, str) else v


class TokenResponse(BaseModel):
    """JWT returned after successful login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Identity decoded from the token claims (id, username, role)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: Role
