"""Forgot-password notification handler.

Issues a short forgot-password token for a known user. Delivering the token
(by email) is not done here.

Flow:
1. Validate email format
2. Find user by email (absent -> InvalidEmailError)
3. Generate a random token (6 characters by default)
4. Save it with a 2-hour expiry
5. Return Success(None)
"""

from datetime import timedelta

from src.application.commands.auth_commands import SendForgotPasswordNotification
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.result import Failure, Result, Success
from src.domain.entities import TokenForgotPassword
from src.domain.errors import InvalidEmailError, ProviderError, RepositoryError
from src.domain.protocols import (
    LoggerProtocol,
    RandomTokenProtocol,
    TimingLoggerProtocol,
    TokenForgotPasswordRepository,
    UserRepository,
)
from src.domain.value_objects import Email

type SendForgotPasswordNotificationError = (
    InvalidEmailError | RepositoryError | ProviderError
)


class SendForgotPasswordNotificationHandler(
    UseCaseHandler[
        SendForgotPasswordNotification, None, SendForgotPasswordNotificationError
    ]
):
    """Handler for forgot-password token issuance."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: TokenForgotPasswordRepository,
        token_generator: RandomTokenProtocol,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
        token_length: int,
        token_ttl: timedelta,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for lookups.
            token_repo: Forgot-password token repository.
            token_generator: Random token generation.
            timing_logger: Use case timing sink.
            logger: Structured logger.
            token_length: Characters per token.
            token_ttl: Token validity window.
        """
        super().__init__(timing_logger, logger)
        self._user_repo = user_repo
        self._token_repo = token_repo
        self._token_generator = token_generator
        self._token_length = token_length
        self._token_ttl = token_ttl

    async def handle(
        self, cmd: SendForgotPasswordNotification
    ) -> Result[None, SendForgotPasswordNotificationError]:
        email_result = Email.validate(cmd.email)
        if isinstance(email_result, Failure):
            return email_result
        email = email_result.value

        user_result = await self._user_repo.find_by_email(email)
        if isinstance(user_result, Failure):
            return user_result
        user = user_result.value
        if user is None:
            # Unknown addresses are reported as invalid, not as not found.
            return Failure(error=InvalidEmailError(email=email.value))

        generate_result = await self._token_generator.generate(self._token_length)
        if isinstance(generate_result, Failure):
            return generate_result

        token = TokenForgotPassword.issue(
            value=generate_result.value, user_id=user.id, ttl=self._token_ttl
        )
        save_result = await self._token_repo.save(token)
        if isinstance(save_result, Failure):
            return save_result

        self._logger.info(
            "Forgot password token issued",
            user_id=str(user.id),
            expires_at=token.expiration_date.isoformat(),
        )
        return Success(value=None)
