from __future__ import annotations

from itertools import islice
from typing import Any

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from bfzip.core.config.settings import settings
from bfzip.core.engine.engine import BreadthFirstZip
from bfzip.core.logging.setup import bind_context, clear_context
from bfzip.sources.datasource import InMemoryDimensionSource

log = structlog.get_logger()

router = APIRouter(tags=["zip"])


# =========================
# Schemas
# =========================

class ZipRequest(BaseModel):
    dimensions: list[list[Any]] = Field(
        ...,
        min_length=1,
        description="One list of values per dimension",
    )
    limit: int | None = Field(
        default=None,
        gt=0,
        description="Max combinations to return (capped by server settings)",
    )


class Combination(BaseModel):
    indices: list[int]
    values: list[Any]


class ZipResponse(BaseModel):
    combinations: list[Combination]
    exhausted: bool
    level: int
    bounds: list[int | None]


# =========================
# Routes
# =========================

@router.post("/zip", response_model=ZipResponse)
def zip_dimensions(payload: ZipRequest) -> ZipResponse:
    limit = settings.max_combinations
    if payload.limit is not None:
        limit = min(payload.limit, limit)

    bind_context(component="api.zip", dimensions=len(payload.dimensions))
    try:
        try:
            engine = BreadthFirstZip(*(InMemoryDimensionSource(d) for d in payload.dimensions))
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

        # one extra pull tells whether anything lies beyond the limit
        pulled = list(islice(engine.indexed(), limit + 1))
        exhausted = len(pulled) <= limit

        combinations = [
            Combination(indices=list(indices), values=list(values))
            for indices, values in pulled[:limit]
        ]

        log.info(
            "zip.served",
            returned=len(combinations),
            limit=limit,
            exhausted=exhausted,
        )

        return ZipResponse(
            combinations=combinations,
            exhausted=exhausted,
            level=engine.state.level,
            bounds=list(engine.bounds),
        )
    finally:
        clear_context()
