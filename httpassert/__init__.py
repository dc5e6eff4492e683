"""
httpassert: assertion-style error handling for HTTP routes.

Handlers assert their preconditions with a status code and a message;
a single recovery boundary turns failed assertions into plain-text
responses and lets every other exception through.

Layers:
    - domain: The structured failure and the assertion primitives.
    - shared: Recovery boundary, middleware, logging.
    - interfaces: FastAPI routers and Pydantic schemas.
    - core: Configuration.
"""

from httpassert.domain.assertions import Assert, error, new, ok, success, throw
from httpassert.domain.errors import AssertFailure, new_failure, status_text

__all__ = [
    "Assert",
    "AssertFailure",
    "error",
    "new",
    "new_failure",
    "ok",
    "status_text",
    "success",
    "throw",
]
