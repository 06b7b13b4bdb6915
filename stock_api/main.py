"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_api import __version__
from stock_api.api import router
from stock_api.api.exception_handlers import setup_exception_handlers
from stock_api.core.config import settings
from stock_api.core.database import SessionLocal, check_db_connected, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Check the pool on startup and release it on shutdown."""
    db = SessionLocal()
    try:
        if check_db_connected(db):
            logger.info("Database connected")
        else:
            logger.warning("Database not reachable at startup")
    finally:
        db.close()
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database pool disposed")


app = FastAPI(
    title="Stock API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)
app.include_router(router)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Stock API"}
