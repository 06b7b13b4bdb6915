"""Pydantic request/response schemas."""

from stock_api.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from stock_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from stock_api.schemas.common import MessageResponse
from stock_api.schemas.health import HealthResponse
from stock_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from stock_api.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
