"""Facebook sign-in handler.

See SocialSignInHandler for the create/reuse/link flow.
"""

from src.application.commands.auth_commands import FacebookSignIn
from src.application.commands.handlers.social_sign_in_handler import (
    SocialSignInHandler,
)
from src.core.result import Result
from src.domain.entities import SocialIdentity, User
from src.domain.errors import LoadUserFacebookApiError, ProviderError, RepositoryError
from src.domain.protocols import (
    FacebookApiProtocol,
    LoggerProtocol,
    NewSocialUser,
    TimingLoggerProtocol,
    UserRepository,
    UserUpdate,
)
from src.domain.value_objects import Id


class FacebookSignInHandler(
    SocialSignInHandler[FacebookSignIn, LoadUserFacebookApiError]
):
    """Handler for Facebook sign-in."""

    provider_label = "facebook"

    def __init__(
        self,
        user_repo: UserRepository,
        facebook_api: FacebookApiProtocol,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        super().__init__(user_repo, timing_logger, logger)
        self._facebook_api = facebook_api

    async def _load_identity(
        self, cmd: FacebookSignIn
    ) -> Result[SocialIdentity, LoadUserFacebookApiError | ProviderError]:
        return await self._facebook_api.load_user(cmd.access_token)

    async def _save_linked_user(
        self, new_user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        return await self._user_repo.save_with_facebook_account(new_user)

    def _is_linked(self, user: User) -> bool:
        return user.facebook_account is not None

    def _link_update(self, user_id: Id, identity: SocialIdentity) -> UserUpdate:
        return UserUpdate(user_id=user_id, facebook_account_id=identity.id)
