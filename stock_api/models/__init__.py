"""SQLAlchemy ORM models."""

from stock_api.models.base import Base
from stock_api.models.category import Category
from stock_api.models.product import Product
from stock_api.models.user import Role, User

__all__ = ["Base", "Category", "Product", "Role", "User"]
