"""Application lifespan: startup and shutdown.

Creates the Valkey client from valkey.url on startup and closes it on
shutdown. The client connects lazily on first command.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as redis
from fastapi import FastAPI

from portal.core.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the Valkey client, yield, then close it."""
    cfg = get_config()

    # ---- Startup ----
    app.state.valkey = redis.from_url(str(cfg.valkey.url), socket_connect_timeout=5)
    logger.info("Valkey client created")

    yield

    # ---- Shutdown ----
    valkey = getattr(app.state, "valkey", None)
    if valkey is not None:
        try:
            await valkey.aclose()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.error("Valkey connection error on close: %s", e)
        app.state.valkey = None
        logger.info("Valkey client closed")
