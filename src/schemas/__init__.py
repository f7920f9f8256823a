"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import UserCreateRequest, AccessTokenResponse
"""

from src.schemas.auth_schemas import (
    # Sign in
    AccessTokenResponse,
    CredentialsRequest,
    SessionCreateRequest,
    # Forgot password
    PasswordNotificationCreateRequest,
    PasswordNotificationCreateResponse,
    # Sign up
    UserCreateRequest,
)

__all__ = [
    # Sign in
    "AccessTokenResponse",
    "CredentialsRequest",
    "SessionCreateRequest",
    # Forgot password
    "PasswordNotificationCreateRequest",
    "PasswordNotificationCreateResponse",
    # Sign up
    "UserCreateRequest",
]
