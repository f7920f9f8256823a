"""Credentials sign-in handler.

Resolves a user from email and password. Does NOT issue tokens.

Flow:
1. Validate password format (before any repository call)
2. Validate email format
3. Find user by email (absent -> SignInError email not found)
4. Compare password against stored hash
5. Mismatch -> SignInError password not match
6. Return Success(AuthenticatedUser)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, errors)
- NO infrastructure imports (collaborators are injected via protocols)
"""

from src.application.commands.auth_commands import (
    AuthenticatedUser,
    CredentialsSignIn,
)
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.result import Failure, Result, Success
from src.domain.enums import SignInErrorMotive
from src.domain.errors import (
    InvalidEmailError,
    InvalidPasswordError,
    ProviderError,
    RepositoryError,
    SignInError,
)
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TimingLoggerProtocol,
    UserRepository,
)
from src.domain.value_objects import Email, Password

type CredentialsSignInError = (
    InvalidPasswordError
    | InvalidEmailError
    | RepositoryError
    | ProviderError
    | SignInError
)


class CredentialsSignInHandler(
    UseCaseHandler[CredentialsSignIn, AuthenticatedUser, CredentialsSignInError]
):
    """Handler for credentials sign-in."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for lookups.
            password_service: Password hash comparison.
            timing_logger: Use case timing sink.
            logger: Structured logger.
        """
        super().__init__(timing_logger, logger)
        self._user_repo = user_repo
        self._password_service = password_service

    async def handle(
        self, cmd: CredentialsSignIn
    ) -> Result[AuthenticatedUser, CredentialsSignInError]:
        password_result = Password.validate(cmd.password)
        if isinstance(password_result, Failure):
            return password_result
        password = password_result.value

        email_result = Email.validate(cmd.email)
        if isinstance(email_result, Failure):
            return email_result
        email = email_result.value

        user_result = await self._user_repo.find_by_email(email)
        if isinstance(user_result, Failure):
            return user_result
        user = user_result.value
        if user is None:
            return Failure(error=SignInError(motive=SignInErrorMotive.EMAIL_NOT_FOUND))

        compare_result = await self._password_service.compare(password, user.password)
        if isinstance(compare_result, Failure):
            return compare_result
        if not compare_result.value:
            self._logger.info("Sign in rejected", reason="password_not_match")
            return Failure(
                error=SignInError(motive=SignInErrorMotive.PASSWORD_NOT_MATCH)
            )

        return Success(value=AuthenticatedUser(user_id=user.id))
