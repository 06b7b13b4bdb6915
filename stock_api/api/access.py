"""Access-level routes: public, any authenticated user, admins only."""

from typing import Annotated

from fastapi import APIRouter, Depends

from stock_api.api.auth import get_current_user, require_admin
from stock_api.schemas.auth import CurrentUser
from stock_api.schemas.common import MessageResponse

router = APIRouter()


@router.get("/public", response_model=MessageResponse)
def public() -> MessageResponse:
    return MessageResponse(message="Anyone can access this route")


@router.get("/protected", response_model=MessageResponse)
def protected(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    return MessageResponse(message=f"Access granted to {current_user.username}")


@router.get("/admin", response_model=MessageResponse)
def admin(
    current_user: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message=f"Admin access granted to {current_user.username}")


@router.get("/metrics", response_model=MessageResponse)
def metrics(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message="System metrics")
