"""Health check endpoints for liveness and readiness probes."""

import logging
from typing import Annotated

import redis.asyncio as redis
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from portal.core.config import get_config
from portal.infrastructure.config.schema import ResolvedConfig
from portal.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(cfg: Annotated[ResolvedConfig, Depends(get_config)]) -> HealthResponse:
    """Return ok status and the configured environment."""
    return HealthResponse(env=cfg.environment.value)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Valkey unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 if Valkey answers PING; 503 otherwise."""
    valkey = getattr(request.app.state, "valkey", None)
    if valkey is None:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="Valkey client not started").model_dump(),
        )
    try:
        await valkey.ping()
    except (redis.ConnectionError, redis.TimeoutError) as e:
        logger.error("Valkey connection error: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="Valkey unreachable").model_dump(),
        )
    return ReadinessResponse()
