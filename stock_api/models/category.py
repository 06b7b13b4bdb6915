"""ORM model for product categories."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from stock_api.models.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(String(500), nullable=True)

    # Deleting a referenced category is left to the foreign key to reject.
    products = relationship("Product", back_populates="category", passive_deletes="all")
