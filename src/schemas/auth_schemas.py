"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain value objects - these are HTTP-layer concerns.
Email and password rules are enforced by the domain, so these schemas only
check shape; a malformed email yields a 400 from the use case, not a 422.

RESTful Endpoints (resource-based):
    POST   /api/v1/users                    - Create user (sign up)
    POST   /api/v1/sessions                 - Create session (sign in)
    POST   /api/v1/password-notifications   - Create forgot-password notification
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Sign up
# =============================================================================


class UserCreateRequest(BaseModel):
    """Request schema for user creation (sign up).

    POST /api/v1/users
    Returns: 201 Created
    """

    email: str = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        description="Password (8-30 chars, no whitespace)",
        examples=["SecurePass123"],
        repr=False,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123",
            }
        }
    )


# =============================================================================
# Sign in
# =============================================================================


class CredentialsRequest(BaseModel):
    """Email and password pair."""

    email: str = Field(..., description="User's email address")
    password: str = Field(..., description="User's password", repr=False)


class SessionCreateRequest(BaseModel):
    """Request schema for session creation (sign in).

    Exactly one method is used, in this order of precedence:
    credentials, then facebook_access_token, then google_access_token.

    POST /api/v1/sessions
    Returns: 200 OK
    """

    credentials: CredentialsRequest | None = Field(
        default=None,
        description="Email/password credentials",
    )
    facebook_access_token: str | None = Field(
        default=None,
        description="Facebook user access token",
        repr=False,
    )
    google_access_token: str | None = Field(
        default=None,
        description="Google OAuth2 access token",
        repr=False,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "credentials": {
                    "email": "user@example.com",
                    "password": "SecurePass123",
                }
            }
        }
    )


class AccessTokenResponse(BaseModel):
    """Response schema carrying a signed access token."""

    access_token: str = Field(..., description="JWT access token")


# =============================================================================
# Forgot password
# =============================================================================


class PasswordNotificationCreateRequest(BaseModel):
    """Request schema for a forgot-password notification.

    POST /api/v1/password-notifications
    Returns: 202 Accepted
    """

    email: str = Field(
        ...,
        description="Email address of the account",
        examples=["user@example.com"],
    )


class PasswordNotificationCreateResponse(BaseModel):
    """Response schema for forgot-password notification (202 Accepted)."""

    message: str = Field(
        default="A password reset code has been issued for this account.",
        description="Success message",
    )
