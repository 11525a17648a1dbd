"""
Application entry point.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from auth import router as auth_router
from core import db, settings
from core.middleware import register_exception_handlers, register_middleware
from posts import router as posts_router
from users import router as users_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    if settings.db_synchronize():
        await db.init_schema()
    logger.info("Application ready to accept requests.")
    try:
        yield
    finally:
        await db.close_pool()


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="CRUD API",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middleware(app)
    register_exception_handlers(app)

    prefix = settings.api_prefix()
    app.include_router(auth_router.router, prefix=prefix, tags=["auth"])
    app.include_router(users_router.router, prefix=prefix, tags=["users"])
    app.include_router(posts_router.router, prefix=prefix, tags=["posts"])

    @app.get(f"{prefix}/", response_class=PlainTextResponse)
    def root() -> str:
        return "CRUD API is running!"

    @app.get(f"{prefix}/health")
    def health() -> dict:
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.monotonic() - _STARTED_AT,
        }

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, log_level=settings.log_level().lower())
