"""User service: CRUD over user accounts, mapped to UserResponse (no password hashes)."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stock_api.core.errors import ConflictError
from stock_api.core.security import hash_password, normalize_email
from stock_api.models.user import Role, User
from stock_api.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "Username or email already exists"


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def find_by_username_or_email(
    db: Session,
    username: str,
    email: str,
    exclude_id: int | None = None,
) -> User | None:
    """Return any user that already holds the username or email (optionally ignoring one id)."""
    query = db.query(User).filter(
        or_(User.username == username, User.email == normalize_email(email))
    )
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first()


def insert_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    role: Role = Role.USER,
) -> User:
    """
    Persist a new user with a hashed password.

    Raises ConflictError when username or email is taken, whether detected by the
    pre-check or by the store's unique constraints.
    """
    email = normalize_email(email)
    if find_by_username_or_email(db, username, email) is not None:
        raise ConflictError(DUPLICATE_USER_MESSAGE)
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_USER_MESSAGE) from e
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "role": user.role.value})
    return user


def list_users(db: Session) -> list[UserResponse]:
    users = db.query(User).order_by(User.id).all()
    return [to_response(u) for u in users]


def get_user(db: Session, user_id: int) -> UserResponse | None:
    user = db.get(User, user_id)
    return to_response(user) if user else None


def create_user(db: Session, data: UserCreate) -> UserResponse:
    user = insert_user(db, data.username, data.email, data.password, role=data.role)
    return to_response(user)


def update_user(db: Session, user_id: int, data: UserUpdate) -> UserResponse | None:
    """Apply the fields present in data; returns None if the user does not exist."""
    user = db.get(User, user_id)
    if user is None:
        return None
    changes = data.model_dump(exclude_unset=True)
    if "username" in changes or "email" in changes:
        clash = find_by_username_or_email(
            db,
            changes.get("username", user.username),
            changes.get("email", user.email),
            exclude_id=user.id,
        )
        if clash is not None:
            raise ConflictError(DUPLICATE_USER_MESSAGE)
    password = changes.pop("password", None)
    if password is not None:
        user.password_hash = hash_password(password)
    for field, value in changes.items():
        setattr(user, field, value)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_USER_MESSAGE) from e
    db.refresh(user)
    logger.info("User updated", extra={"user_id": user.id, "fields": sorted(data.model_fields_set)})
    return to_response(user)


def remove_user(db: Session, user_id: int) -> UserResponse | None:
    user = db.get(User, user_id)
    if user is None:
        return None
    removed = to_response(user)
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id})
    return removed
