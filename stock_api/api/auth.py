"""Register/login routes and the auth dependencies (get_current_user, require_roles)."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from stock_api.core.database import get_db
from stock_api.core.errors import AuthenticationError, AuthorizationError, ConflictError
from stock_api.core.security import decode_access_token, has_required_role
from stock_api.models.user import Role
from stock_api.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from stock_api.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account with the default 'user' role."""
    try:
        user = auth_service.register(db, body.username, body.email, body.password)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return RegisterResponse(message="User created", id=user.id)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        token = auth_service.login(db, body.email, body.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    return TokenResponse(token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity in its claims.

    Missing token raises AuthenticationError (401). Bad signature, expiry or
    unusable claims raise AuthorizationError (403).
    """
    if credentials is None:
        raise AuthenticationError("No token provided")
    try:
        payload = decode_access_token(credentials.credentials)
        return CurrentUser.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.warning("Rejected bearer token")
        raise AuthorizationError("Invalid or expired token") from e


def require_roles(*roles: Role) -> Callable[..., CurrentUser]:
    """Build a dependency that admits only users whose role is in roles."""
    allowed = frozenset(roles)

    def check_role(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not has_required_role(current_user.role, allowed):
            raise AuthorizationError("Access denied")
        return current_user

    return check_role


require_admin = require_roles(Role.ADMIN)
