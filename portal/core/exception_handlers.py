"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Browser-facing errors
(404 and unhandled 500) render the 404.html / 500.html templates; other
HTTP errors map to JSON.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.core.config import config

logger = logging.getLogger(__name__)


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render the 404 page for unknown URLs; JSON for other HTTP errors."""
    if exc.status_code == 404:
        return request.app.state.templates.TemplateResponse(
            request,
            "404.html",
            {"title": "Not Found", "url": request.url.path},
            status_code=404,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Render the 500 page; include the error text only outside production."""
    logger.exception("Unhandled exception: %s", exc)
    message = "An unexpected error occurred" if config.is_production() else str(exc)
    return request.app.state.templates.TemplateResponse(
        request,
        "500.html",
        {"title": "Server Error", "error": message},
        status_code=500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app and setting app.state.templates.
    """
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
