"""Sign-up handler.

Creates a password user. Does NOT issue tokens: the caller signs the new user
in through SignInHandler.

Flow:
1. Validate password, then hash it
2. Validate email
3. Check email uniqueness (taken -> EmailAlreadyExistsError, no write)
4. Save user with email not validated
5. Return Success(AuthenticatedUser)

The uniqueness check is a fast path only. Two concurrent sign-ups can both
pass it; the storage unique constraint rejects the second insert, which comes
back as a RepositoryError with status conflict.
"""

from src.application.commands.auth_commands import AuthenticatedUser, SignUp
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidPasswordError,
    ProviderError,
    RepositoryError,
)
from src.domain.protocols import (
    LoggerProtocol,
    NewUser,
    PasswordHashingProtocol,
    TimingLoggerProtocol,
    UserRepository,
)
from src.domain.value_objects import Email, Password

type SignUpError = (
    InvalidPasswordError
    | ProviderError
    | InvalidEmailError
    | RepositoryError
    | EmailAlreadyExistsError
)


class SignUpHandler(UseCaseHandler[SignUp, AuthenticatedUser, SignUpError]):
    """Handler for user sign-up."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        timing_logger: TimingLoggerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize sign-up handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            timing_logger: Use case timing sink.
            logger: Structured logger.
        """
        super().__init__(timing_logger, logger)
        self._user_repo = user_repo
        self._password_service = password_service

    async def handle(self, cmd: SignUp) -> Result[AuthenticatedUser, SignUpError]:
        password_result = Password.validate(cmd.password)
        if isinstance(password_result, Failure):
            return password_result

        hash_result = await self._password_service.encrypt(password_result.value)
        if isinstance(hash_result, Failure):
            return hash_result

        email_result = Email.validate(cmd.email)
        if isinstance(email_result, Failure):
            return email_result
        email = email_result.value

        existing_result = await self._user_repo.find_by_email(email)
        if isinstance(existing_result, Failure):
            return existing_result
        if existing_result.value is not None:
            return Failure(error=EmailAlreadyExistsError(email=email.value))

        save_result = await self._user_repo.save(
            NewUser(email=email, password=hash_result.value, is_email_validated=False)
        )
        if isinstance(save_result, Failure):
            return save_result

        self._logger.info("User signed up", user_id=str(save_result.value))
        return Success(value=AuthenticatedUser(user_id=save_result.value))
