"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Assertion middleware (recovery boundary)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from httpassert.core.config import settings
from httpassert.interfaces.health import router as health_router
from httpassert.interfaces.session import router as session_router
from httpassert.shared.errors import RecoveryBoundary, register_assert_handlers
from httpassert.shared.logging import configure_logging


def create_app(boundary: RecoveryBoundary | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        boundary: Recovery boundary to install. Defaults to one logging
            to the configured ``settings.log_name`` logger.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Assertion failures ---
    register_assert_handlers(app, boundary)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(session_router, prefix="/api/v1")

    return app


app = create_app()
