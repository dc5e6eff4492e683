"""
Pydantic schemas for API request/response validation.

Login fields default to empty strings so that missing values are
reported by the route's assertions (400) rather than by request
validation (422).
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class LoginRequest(BaseModel):
    """Request schema for the login endpoint.

    Attributes:
        email: Username of the account.
        password: Plain-text password to check.
    """

    email: str = ""
    password: str = ""


class SessionResponse(BaseModel):
    """Response schema for a successful login."""

    user_id: int
    redirect: str
