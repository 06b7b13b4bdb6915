"""User management routes (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from stock_api.api.auth import require_admin
from stock_api.core.database import get_db
from stock_api.core.errors import ConflictError, NotFoundError
from stock_api.schemas.common import MessageResponse
from stock_api.schemas.user import UserCreate, UserResponse, UserUpdate
from stock_api.services import users as user_service

router = APIRouter(dependencies=[Depends(require_admin)])

NOT_FOUND_MESSAGE = "User not found"


@router.get("", response_model=list[UserResponse])
def list_users(db: Annotated[Session, Depends(get_db)]) -> list[UserResponse]:
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> UserResponse:
    user = user_service.get_user(db, user_id)
    if user is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, db: Annotated[Session, Depends(get_db)]) -> UserResponse:
    """Create a user with an explicit role (defaults to 'user')."""
    try:
        return user_service.create_user(db, body)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    try:
        user = user_service.update_user(db, user_id, body)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    if user is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return user


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    if user_service.remove_user(db, user_id) is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return MessageResponse(message=f"User {user_id} deleted")
