"""Category service: CRUD over categories, mapped to CategoryResponse."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stock_api.core.errors import ConflictError
from stock_api.models.category import Category
from stock_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Category name already exists"
IN_USE_MESSAGE = "Category is referenced by existing products"


def to_response(category: Category) -> CategoryResponse:
    return CategoryResponse.model_validate(category)


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    query = db.query(Category.id).filter(Category.name == name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return query.first() is not None


def list_categories(db: Session) -> list[CategoryResponse]:
    categories = db.query(Category).order_by(Category.id).all()
    return [to_response(c) for c in categories]


def get_category(db: Session, category_id: int) -> CategoryResponse | None:
    category = db.get(Category, category_id)
    return to_response(category) if category else None


def create_category(db: Session, data: CategoryCreate) -> CategoryResponse:
    """Persist a new category. Raises ConflictError if the name is taken."""
    if _name_taken(db, data.name):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)
    category = Category(**data.model_dump())
    db.add(category)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_NAME_MESSAGE) from e
    db.refresh(category)
    logger.info("Category created", extra={"category_id": category.id})
    return to_response(category)


def update_category(
    db: Session, category_id: int, data: CategoryUpdate
) -> CategoryResponse | None:
    """Apply the fields present in data; returns None if the category does not exist."""
    category = db.get(Category, category_id)
    if category is None:
        return None
    changes = data.model_dump(exclude_unset=True)
    if "name" in changes and _name_taken(db, changes["name"], exclude_id=category_id):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)
    for field, value in changes.items():
        setattr(category, field, value)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(DUPLICATE_NAME_MESSAGE) from e
    db.refresh(category)
    logger.info("Category updated", extra={"category_id": category_id})
    return to_response(category)


def remove_category(db: Session, category_id: int) -> CategoryResponse | None:
    """
    Delete by id; returns the removed record or None if absent.

    Products still pointing at the category make the store reject the delete,
    which surfaces as ConflictError.
    """
    category = db.get(Category, category_id)
    if category is None:
        return None
    removed = to_response(category)
    db.delete(category)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(IN_USE_MESSAGE) from e
    logger.info("Category deleted", extra={"category_id": category_id})
    return removed
