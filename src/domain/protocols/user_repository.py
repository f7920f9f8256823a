"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.result import Result
from src.domain.entities import User
from src.domain.errors import ProviderError, RepositoryError
from src.domain.value_objects import Email, Id, PasswordHash, ValidatedEmail


@dataclass(frozen=True, slots=True, kw_only=True)
class NewUser:
    """Password user to be created by sign-up."""

    email: ValidatedEmail
    password: PasswordHash
    is_email_validated: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class NewSocialUser:
    """User to be created on a first social sign-in, already linked.

    The email is the one the social provider verified.
    """

    email: Email
    account_id: str
    is_email_validated: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class UserUpdate:
    """Social account links to attach to an existing user.

    Fields left as None are not touched.
    """

    user_id: Id
    facebook_account_id: str | None = None
    google_account_id: str | None = None


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        - find_by_email: Look up a user (None when absent)
        - save: Create a password user
        - save_with_facebook_account: Create a user linked to Facebook
        - save_with_google_account: Create a user linked to Google
        - update: Attach social account links
    """

    async def find_by_email(
        self, email: Email
    ) -> Result[User | None, RepositoryError]:
        """Look up a user by email. Success(None) when there is none."""
        ...

    async def save(
        self, user: NewUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        """Create a password user and return its id.

        A duplicate email is reported as RepositoryError with status conflict.
        ProviderError when no id could be generated.
        """
        ...

    async def save_with_facebook_account(
        self, user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        ...

    async def save_with_google_account(
        self, user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        ...

    async def update(self, update: UserUpdate) -> Result[None, RepositoryError]:
        ...
