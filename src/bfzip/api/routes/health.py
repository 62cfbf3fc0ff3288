from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from bfzip.core.config.settings import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """
    Health check response, including the per-request combination cap.
    """

    status: str
    environment: str
    max_combinations: int


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        environment=settings.env,
        max_combinations=settings.max_combinations,
    )
