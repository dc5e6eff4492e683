"""
Session router.

Example call site for the assertions: every precondition is asserted
in place and failures are rendered by the assertion middleware.
Users live in an in-memory table; a real application would use its
datastore here.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass

from fastapi import APIRouter

from httpassert.domain.assertions import Assert, throw
from httpassert.interfaces.schemas import LoginRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])

HTTP_400 = 400
HTTP_404 = 404


def hash_password(password: str) -> bytes:
    return hashlib.sha256(password.encode("utf-8")).digest()


@dataclass(frozen=True)
class User:
    """Account record."""

    id: int
    email: str
    password_hash: bytes


USERS: dict[str, User] = {
    "admin@example.com": User(1, "admin@example.com", hash_password("secret")),
}


@router.post(
    "/login",
    response_model=SessionResponse,
    summary="Log in",
    description="Checks the credentials and returns the session target.",
)
def login(payload: LoginRequest) -> SessionResponse:
    """Authenticate a user by email and password."""
    scope = Assert()
    scope.on_failure(lambda: logger.info("Login rejected for %r", payload.email))

    scope.ok(payload.email != "", HTTP_400, "No username given")
    scope.ok(payload.password != "", HTTP_400, "No password given")

    user = USERS.get(payload.email)
    scope.ok(user is not None, HTTP_400, "Invalid username")

    valid = hmac.compare_digest(user.password_hash, hash_password(payload.password))
    scope.ok(valid, HTTP_400, "Invalid password")

    return SessionResponse(user_id=user.id, redirect="/app")


@router.get("/users/{user_id}", summary="Get user")
def get_user(user_id: int) -> dict[str, int | str]:
    """Return the public fields of a user."""
    for user in USERS.values():
        if user.id == user_id:
            return {"id": user.id, "email": user.email}
    throw(HTTP_404)
