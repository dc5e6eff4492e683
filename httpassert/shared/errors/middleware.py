"""
Assertion middleware for FastAPI / Starlette.

Installs the recovery boundary in front of the routes. It must be
registered before any route that uses the assertions, otherwise an
AssertFailure reaches the server error handler as a generic 500.
"""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from httpassert.shared.errors.boundary import RecoveryBoundary


class AssertMiddleware(BaseHTTPMiddleware):
    """Middleware that renders assertion failures raised by downstream handlers.

    Failures become plain-text responses. Every other exception passes
    through untouched.
    """

    def __init__(self, app: ASGIApp, boundary: RecoveryBoundary | None = None) -> None:
        super().__init__(app)
        self.boundary = boundary or RecoveryBoundary()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the request through the recovery boundary."""
        return await self.boundary.wrap(call_next)(request)


def recovery_middleware(
    boundary: RecoveryBoundary | None = None,
) -> Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]:
    """Build the middleware function for ``app.middleware("http")``.

    Args:
        boundary: The boundary to use. A default one is created if omitted.

    Returns:
        A ``(request, call_next) -> response`` coroutine function.
    """
    boundary = boundary or RecoveryBoundary()

    async def middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await boundary.wrap(call_next)(request)

    return middleware


def register_assert_handlers(app: FastAPI, boundary: RecoveryBoundary | None = None) -> None:
    """Install the assertion middleware on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        boundary: Optional boundary, e.g. with a custom logger.
    """
    app.add_middleware(AssertMiddleware, boundary=boundary)
