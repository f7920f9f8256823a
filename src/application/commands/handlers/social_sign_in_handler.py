"""Shared flow for social sign-in handlers.

Account linking is implicit and email-based: the email the provider verified
decides which local user the social identity belongs to.

Flow:
1. Load the verified identity from the provider
2. Find local user by that email
3. No user -> create one already linked, email marked validated
4. User already linked to any account of this provider -> return it, no
   write (an existing link is never replaced)
5. User not linked -> attach the account id, return it

Subclasses plug in the provider and the per-provider repository calls.
"""

from abc import abstractmethod
from typing import Generic, TypeVar

from src.application.commands.auth_commands import AuthenticatedUser
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.result import Failure, Result, Success
from src.domain.entities import SocialIdentity, User
from src.domain.errors import ProviderError, RepositoryError
from src.domain.protocols import (
    LoggerProtocol,
    NewSocialUser,
    TimingLoggerProtocol,
    UserRepository,
    UserUpdate,
)
from src.domain.value_objects import Email, Id

C = TypeVar("C")  # Command type
E = TypeVar("E")  # Provider-specific load error


class SocialSignInHandler(
    UseCaseHandler[C, AuthenticatedUser, E | ProviderError | RepositoryError],
    Generic[C, E],
):
    """Sign in (creating or linking as needed) through a social provider."""

    provider_label: str

    def __init__(
        self,
        user_repo: UserRepository,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        super().__init__(timing_logger, logger)
        self._user_repo = user_repo

    async def handle(
        self, cmd: C
    ) -> Result[AuthenticatedUser, E | ProviderError | RepositoryError]:
        identity_result = await self._load_identity(cmd)
        if isinstance(identity_result, Failure):
            return identity_result
        identity = identity_result.value

        # The provider vouched for this address.
        email = Email(identity.email)

        user_result = await self._user_repo.find_by_email(email)
        if isinstance(user_result, Failure):
            return user_result
        user = user_result.value

        if user is None:
            save_result = await self._save_linked_user(
                NewSocialUser(email=email, account_id=identity.id)
            )
            if isinstance(save_result, Failure):
                return save_result
            self._logger.info(
                "User created from social sign in",
                provider=self.provider_label,
                user_id=str(save_result.value),
            )
            return Success(value=AuthenticatedUser(user_id=save_result.value))

        if self._is_linked(user):
            return Success(value=AuthenticatedUser(user_id=user.id))

        update_result = await self._user_repo.update(
            self._link_update(user.id, identity)
        )
        if isinstance(update_result, Failure):
            return update_result
        self._logger.info(
            "Social account linked",
            provider=self.provider_label,
            user_id=str(user.id),
        )
        return Success(value=AuthenticatedUser(user_id=user.id))

    @abstractmethod
    async def _load_identity(
        self, cmd: C
    ) -> Result[SocialIdentity, E | ProviderError]:
        """Resolve the verified identity behind the command's access token."""

    @abstractmethod
    async def _save_linked_user(
        self, new_user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        """Create a user already linked to the provider account."""

    @abstractmethod
    def _is_linked(self, user: User) -> bool:
        """Check if `user` already has an account of this provider linked."""

    @abstractmethod
    def _link_update(self, user_id: Id, identity: SocialIdentity) -> UserUpdate:
        """Build the update attaching `identity` to `user_id`."""
