"""Category routes: read access for any caller or bearer, writes for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from stock_api.api.auth import get_current_user, require_admin
from stock_api.core.database import get_db
from stock_api.core.errors import ConflictError, NotFoundError
from stock_api.schemas.auth import CurrentUser
from stock_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from stock_api.schemas.common import MessageResponse
from stock_api.services import categories as category_service

router = APIRouter()

NOT_FOUND_MESSAGE = "Category not found"


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[CategoryResponse]:
    return category_service.list_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    category = category_service.get_category(db, category_id)
    if category is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return category


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryResponse:
    try:
        return category_service.create_category(db, body)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryResponse:
    try:
        category = category_service.update_category(db, category_id, body)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    if category is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return category


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    try:
        removed = category_service.remove_category(db, category_id)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    if removed is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return MessageResponse(message=f"Category {category_id} deleted")
