"""
Recovery boundary for assertion failures.

Runs the next step of request processing and converts an AssertFailure
into a plain-text HTTP response. Internal (500) failures are logged with
their traceback first. Any other exception is re-raised unchanged so that
genuine defects reach the outer server error handling.
"""

import logging
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from httpassert.core.config import settings
from httpassert.domain.errors import AssertFailure

Handler = Callable[[Request], Awaitable[Response]]


class RecoveryBoundary:
    """Interception point for AssertFailure, one per application.

    The logger and prefix are fixed at construction and only read
    afterwards, so a single boundary can serve concurrent requests.
    """

    def __init__(
        self, logger: logging.Logger | None = None, prefix: str | None = None
    ) -> None:
        self.logger = logger or logging.getLogger(settings.log_name)
        self.prefix = settings.log_prefix if prefix is None else prefix

    def wrap(self, next_handler: Handler) -> Handler:
        """Wrap a request handler so that assertion failures become responses.

        Args:
            next_handler: The downstream handler to invoke.

        Returns:
            A handler with the same signature.
        """

        async def handler(request: Request) -> Response:
            try:
                return await next_handler(request)
            except AssertFailure as failure:
                return self.recover(failure)

        return handler

    def recover(self, failure: AssertFailure) -> Response:
        """Log internal failures and render the failure as a response."""
        if failure.is_internal:
            self.log_panic(failure)
        return self.render(failure)

    def log_panic(self, failure: AssertFailure) -> None:
        """Write one log entry with the message and the full traceback.

        Best-effort: a failing log write never replaces the response.
        """
        try:
            self.logger.error(
                "%sPANIC: %s\n%s",
                self.prefix,
                failure.message,
                failure.traceback_text(),
            )
        except Exception:
            pass

    @staticmethod
    def render(failure: AssertFailure) -> Response:
        """Build the plain error response: the message followed by a newline."""
        return PlainTextResponse(
            failure.message + "\n",
            status_code=failure.status_code,
            headers={"X-Content-Type-Options": "nosniff"},
        )
