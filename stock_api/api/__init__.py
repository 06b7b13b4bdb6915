"""HTTP routers: auth at AUTH_PREFIX, resources under API_PREFIX."""

from fastapi import APIRouter

from stock_api.api import access, auth, categories, health, products, users
from stock_api.core.config import settings

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(access.router, tags=["access"])
router.include_router(auth.router, prefix=settings.AUTH_PREFIX, tags=["auth"])
router.include_router(categories.router, prefix=f"{settings.API_PREFIX}/categoria", tags=["categories"])
router.include_router(products.router, prefix=f"{settings.API_PREFIX}/producto", tags=["products"])
router.include_router(users.router, prefix=f"{settings.API_PREFIX}/usuario", tags=["users"])
