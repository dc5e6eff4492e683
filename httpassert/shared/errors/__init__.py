"""
Shared error handling package.

Centralizes assertion-failure-to-HTTP rendering so that every
route answers failed assertions the same way.
"""

from httpassert.shared.errors.boundary import RecoveryBoundary
from httpassert.shared.errors.middleware import (
    AssertMiddleware,
    recovery_middleware,
    register_assert_handlers,
)

__all__ = [
    "AssertMiddleware",
    "RecoveryBoundary",
    "recovery_middleware",
    "register_assert_handlers",
]
