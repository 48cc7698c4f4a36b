"""FastAPI application entry point.

Wiring only: configuration, lifespan, exception handlers, middleware,
routers, templates and static files. No business logic here. See
portal.core.config for the configuration pipeline.

Configuration is loaded inside create_app(); a missing or invalid file
aborts startup with a ConfigurationError.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.sessions import SessionMiddleware

from portal.api import api_router
from portal.core.config import config
from portal.core.exception_handlers import register_exception_handlers
from portal.core.lifespan import create_lifespan
from portal.core.limiter import create_limiter
from portal.infrastructure.config.schema import PathsConfig
from portal.middleware import RequestSizeLimitMiddleware, SecurityHeadersMiddleware
from portal.shared.telemetry.logging import setup_logging
from portal.shared.utils import parse_byte_size

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "app.sid"
TEMPLATE_SUFFIX = ".html"


def create_templates(paths: PathsConfig) -> Jinja2Templates:
    """Build the Jinja2 environment over views, layouts and partials.

    Pages extend `layout`, the template named by paths.defaultLayout.
    """
    templates = Jinja2Templates(
        directory=[paths.views, paths.views_layouts, paths.views_partials]
    )
    templates.env.globals["layout"] = f"{paths.default_layout}{TEMPLATE_SUFFIX}"
    return templates


def create_app() -> FastAPI:
    """Build and return the FastAPI application from the loaded configuration."""
    setup_logging()
    cfg = config.load()

    app = FastAPI(
        title="portal",
        lifespan=create_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.templates = create_templates(cfg.paths)
    app.state.templates.env.globals["is_production"] = config.is_production()

    app.state.limiter = create_limiter(cfg.rate_limit)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: size limit → security → gzip → session → rate limit.
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        SessionMiddleware,
        secret_key=cfg.session.secret.get_secret_value(),
        session_cookie=SESSION_COOKIE_NAME,
        same_site="lax",
        https_only=config.is_production(),
    )
    app.add_middleware(GZipMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, hsts=config.is_production())
    app.add_middleware(
        RequestSizeLimitMiddleware,
        max_bytes=parse_byte_size(cfg.http.body_limit),
    )

    app.include_router(api_router)

    # Mounted last so routes win; unknown files fall through to the 404 page.
    app.mount("/", StaticFiles(directory=cfg.paths.static), name="static")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on http.port."""
    import uvicorn

    port = config.http.port
    logger.info(
        "Server listening on port %s (%s mode)", port, config.environment.value
    )
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
