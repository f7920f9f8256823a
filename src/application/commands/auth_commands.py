"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate raw input through value objects and run the use case
- Handlers return Result types, never raise for expected failures
- Plaintext passwords and access tokens are excluded from repr
"""

from dataclasses import dataclass, field

from src.domain.value_objects import Id


@dataclass(frozen=True, kw_only=True)
class SignUp:
    """Create a password user.

    Attributes:
        email: Raw email address (validated by the handler).
        password: Raw plaintext password (validated, then hashed).

    Example:
        >>> command = SignUp(email="a@b.com", password="password1")
        >>> result = await handler.execute(command)
    """

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class CredentialsSignIn:
    """Resolve a user from email and password.

    Attributes:
        email: Raw email address.
        password: Raw plaintext password.
    """

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class FacebookSignIn:
    """Resolve (and create or link) a user from a Facebook access token.

    Attributes:
        access_token: Client-side Facebook user access token.
    """

    access_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class GoogleSignIn:
    """Resolve (and create or link) a user from a Google access token.

    Attributes:
        access_token: Client-side Google OAuth2 access token.
    """

    access_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class AuthenticatedUser:
    """Response from a successful identity resolution.

    This is a response DTO, not a command. It is also accepted by SignIn as
    an already resolved identity (used right after sign-up).

    Attributes:
        user_id: User's unique identifier.
    """

    user_id: Id


@dataclass(frozen=True, kw_only=True)
class SignIn:
    """Sign in through whichever method is populated, and issue a token.

    Precedence when several are set: credentials, then facebook, then google,
    then user.

    Attributes:
        credentials: Email/password pair.
        facebook_access_token: Facebook user access token.
        google_access_token: Google access token.
        user: Identity already resolved by another use case.

    Example:
        >>> command = SignIn(
        ...     credentials=CredentialsSignIn(email="a@b.com", password="password1"),
        ... )
        >>> result = await handler.execute(command)
        >>> # Returns Success(AccessToken) or Failure(error)
    """

    credentials: CredentialsSignIn | None = None
    facebook_access_token: str | None = field(default=None, repr=False)
    google_access_token: str | None = field(default=None, repr=False)
    user: AuthenticatedUser | None = None


@dataclass(frozen=True, kw_only=True)
class AccessToken:
    """Response from a successful sign-in.

    Attributes:
        access_token: Signed access token (JWT).
    """

    access_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class SendForgotPasswordNotification:
    """Issue a forgot-password token for the user owning `email`.

    Attributes:
        email: Raw email address.
    """

    email: str
