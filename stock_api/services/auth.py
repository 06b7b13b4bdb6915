"""Authentication service: registration and credential login."""

import logging

from sqlalchemy.orm import Session

from stock_api.core.errors import AuthenticationError
from stock_api.core.security import create_access_token, verify_password
from stock_api.models.user import Role, User
from stock_api.services.users import find_by_email, insert_user

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


def register(db: Session, username: str, email: str, password: str) -> User:
    """
    Create an account with the least-privileged role.

    Raises ConflictError if the username or email is already registered.
    """
    return insert_user(db, username, email, password, role=Role.USER)


def login(db: Session, email: str, password: str) -> str:
    """
    Verify credentials and return a signed access token for {id, username, role}.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    user = find_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Login failed")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return create_access_token(user.id, user.username, user.role)
