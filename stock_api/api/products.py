"""Product routes: same access rules as categories; responses carry the category name."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from stock_api.api.auth import get_current_user, require_admin
from stock_api.core.database import get_db
from stock_api.core.errors import ConflictError, InvalidReferenceError, NotFoundError
from stock_api.schemas.auth import CurrentUser
from stock_api.schemas.common import MessageResponse
from stock_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from stock_api.services import products as product_service

router = APIRouter()

NOT_FOUND_MESSAGE = "Product not found"


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[ProductResponse]:
    return product_service.list_products(db)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    product = product_service.get_product(db, product_id)
    if product is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductResponse:
    """Create a product under an existing category. Price and stock must be >= 0."""
    try:
        return product_service.create_product(db, body)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductResponse:
    """Partially update a product and return the record as stored after the update."""
    try:
        product = product_service.update_product(db, product_id, body)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    if product is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    if product_service.remove_product(db, product_id) is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return MessageResponse(message=f"Product {product_id} deleted")
