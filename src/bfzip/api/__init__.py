from __future__ import annotations

from fastapi import APIRouter

from bfzip.api.routes.health import router as health_router
from bfzip.api.routes.zip import router as zip_router

# Top-level API router
router = APIRouter()

# Route composition
router.include_router(health_router)
router.include_router(zip_router)
