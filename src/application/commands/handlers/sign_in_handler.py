"""Sign-in dispatcher handler.

Resolves the user through exactly one sign-in method and issues an access
token for it.

Flow:
1. Pick the method: credentials, then facebook, then google, then an already
   resolved user (first one present wins)
2. None present -> SignInError user not found
3. Run the chosen use case; its failure is returned as-is
4. Sign a JWT for the resolved user id
5. Return Success(AccessToken)
"""

from src.application.commands.auth_commands import (
    AccessToken,
    AuthenticatedUser,
    FacebookSignIn,
    GoogleSignIn,
    SignIn,
)
from src.application.commands.handlers.credentials_sign_in_handler import (
    CredentialsSignInHandler,
)
from src.application.commands.handlers.facebook_sign_in_handler import (
    FacebookSignInHandler,
)
from src.application.commands.handlers.google_sign_in_handler import (
    GoogleSignInHandler,
)
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import SignInErrorMotive
from src.domain.errors import SignInError
from src.domain.protocols import (
    LoggerProtocol,
    TimingLoggerProtocol,
    TokenGenerationProtocol,
)


class SignInHandler(UseCaseHandler[SignIn, AccessToken, DomainError]):
    """Handler for the polymorphic sign-in entry point."""

    def __init__(
        self,
        credentials_sign_in: CredentialsSignInHandler,
        facebook_sign_in: FacebookSignInHandler,
        google_sign_in: GoogleSignInHandler,
        token_service: TokenGenerationProtocol,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize dispatcher with the per-method use cases.

        Args:
            credentials_sign_in: Email/password use case.
            facebook_sign_in: Facebook use case.
            google_sign_in: Google use case.
            token_service: Access token signing.
            timing_logger: Use case timing sink.
            logger: Structured logger.
        """
        super().__init__(timing_logger, logger)
        self._credentials_sign_in = credentials_sign_in
        self._facebook_sign_in = facebook_sign_in
        self._google_sign_in = google_sign_in
        self._token_service = token_service

    async def handle(self, cmd: SignIn) -> Result[AccessToken, DomainError]:
        user_result = await self._resolve_user(cmd)
        if isinstance(user_result, Failure):
            return user_result
        user = user_result.value

        token_result = await self._token_service.generate_jwt(user.user_id)
        if isinstance(token_result, Failure):
            return token_result

        self._logger.info("User signed in", user_id=str(user.user_id))
        return Success(value=AccessToken(access_token=token_result.value))

    async def _resolve_user(
        self, cmd: SignIn
    ) -> Result[AuthenticatedUser, DomainError]:
        if cmd.credentials is not None:
            return await self._credentials_sign_in.execute(cmd.credentials)
        if cmd.facebook_access_token is not None:
            return await self._facebook_sign_in.execute(
                FacebookSignIn(access_token=cmd.facebook_access_token)
            )
        if cmd.google_access_token is not None:
            return await self._google_sign_in.execute(
                GoogleSignIn(access_token=cmd.google_access_token)
            )
        if cmd.user is not None:
            return Success(value=cmd.user)
        return Failure(error=SignInError(motive=SignInErrorMotive.USER_NOT_FOUND))
