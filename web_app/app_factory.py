"""FastAPI application factory."""

from fastapi import FastAPI

from .api import api_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware
from .web import web_router


def create_app(service_instance, config) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: ShortLinkService instance (None when a lifespan
            handler builds it at startup)
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Shortlink",
        description="URL shortening service with click counting",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Shared, read-only from the handlers' point of view
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    # API routes first so /api/... is never taken for an identifier
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Links"])

    return app
