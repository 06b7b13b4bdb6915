"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Column, Enum, Integer, String

from stock_api.models.base import Base, TimestampMixin


class Role(str, enum.Enum):
    """Closed set of roles; USER is the least-privileged default."""

    USER = "user"
    ADMIN = "admin"


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    email is stored trimmed and lower-cased; username and email are unique.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=32,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=Role.USER,
        server_default=Role.USER.value,
    )
