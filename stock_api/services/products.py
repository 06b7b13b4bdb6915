"""Product service: CRUD over products with the category name joined at read time."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from stock_api.core.errors import ConflictError, InvalidReferenceError
from stock_api.models.category import Category
from stock_api.models.product import Product
from stock_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Product name already exists"
FOREIGN_KEY_VIOLATION = "23503"


def to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        category_id=product.category_id,
        category_name=product.category.name if product.category else None,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _load(db: Session, product_id: int) -> Product | None:
    return (
        db.query(Product)
        .options(joinedload(Product.category))
        .filter(Product.id == product_id)
        .first()
    )


def _ensure_category(db: Session, category_id: int) -> None:
    if db.get(Category, category_id) is None:
        raise InvalidReferenceError(f"Category {category_id} does not exist")


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    query = db.query(Product.id).filter(Product.name == name)
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    return query.first() is not None


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    # Postgres reports SQLSTATE 23503; SQLite only says so in the message.
    if getattr(error.orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key" in str(error.orig).lower()


def _commit(db: Session, category_id: int | None = None) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_foreign_key_violation(e):
            raise InvalidReferenceError(f"Category {category_id} does not exist") from e
        raise ConflictError(DUPLICATE_NAME_MESSAGE) from e


def list_products(db: Session) -> list[ProductResponse]:
    products = (
        db.query(Product)
        .options(joinedload(Product.category))
        .order_by(Product.id)
        .all()
    )
    return [to_response(p) for p in products]


def get_product(db: Session, product_id: int) -> ProductResponse | None:
    product = _load(db, product_id)
    return to_response(product) if product else None


def create_product(db: Session, data: ProductCreate) -> ProductResponse:
    """
    Persist a new product.

    Raises InvalidReferenceError if category_id does not resolve and
    ConflictError if the name is taken.
    """
    _ensure_category(db, data.category_id)
    if _name_taken(db, data.name):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)
    product = Product(**data.model_dump())
    db.add(product)
    _commit(db, data.category_id)
    logger.info(
        "Product created",
        extra={"product_id": product.id, "category_id": product.category_id},
    )
    return to_response(_load(db, product.id))


def update_product(
    db: Session, product_id: int, data: ProductUpdate
) -> ProductResponse | None:
    """Apply the fields present in data and return the refreshed record, or None if absent."""
    product = db.get(Product, product_id)
    if product is None:
        return None
    changes = data.model_dump(exclude_unset=True)
    if "category_id" in changes:
        _ensure_category(db, changes["category_id"])
    if "name" in changes and _name_taken(db, changes["name"], exclude_id=product_id):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)
    for field, value in changes.items():
        setattr(product, field, value)
    _commit(db, product.category_id)
    logger.info("Product updated", extra={"product_id": product_id})
    return to_response(_load(db, product_id))


def remove_product(db: Session, product_id: int) -> ProductResponse | None:
    product = _load(db, product_id)
    if product is None:
        return None
    removed = to_response(product)
    db.delete(product)
    db.commit()
    logger.info("Product deleted", extra={"product_id": product_id})
    return removed
