"""Router aggregation.

Health probes under /health, site pages at the root, auth forms under /auth.
"""

from fastapi import APIRouter

from portal.api.endpoints import auth, health, nav

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(nav.router, tags=["pages"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
