"""HTTP routes."""

from portal.api.router import api_router

__all__ = ["api_router"]
