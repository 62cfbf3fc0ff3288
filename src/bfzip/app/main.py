from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI

from bfzip.api import router as api_router
from bfzip.core.config.settings import settings
from bfzip.core.logging.setup import configure_logging

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info("app.startup", environment=settings.env)
    yield
    log.info("app.shutdown")


def create_app() -> FastAPI:
    """
    Application factory.

    The single place where the FastAPI app is created and configured.
    """
    configure_logging(level=settings.log_level, env=settings.env)

    app = FastAPI(
        title="bfzip",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api")

    return app


# ASGI entrypoint
app = create_app()
