"""Unit tests for SignUpHandler.

Tests cover:
- Successful sign-up returns the new user id
- Password validated and hashed before the email is checked
- Invalid email / password short-circuit without repository calls
- Duplicate email returns EmailAlreadyExistsError without a write
- Collaborator failures propagate unchanged

Architecture:
- Unit tests for application handler (mocked dependencies)
- Mock repository and password service protocols
"""

from unittest.mock import AsyncMock

import pytest

from src.application.commands import AuthenticatedUser, SignUp
from src.application.commands.handlers.sign_up_handler import SignUpHandler
from src.core.enums import StatusError
from src.core.result import Failure, Success
from src.domain.enums import (
    InvalidPasswordMotive,
    ProviderMethod,
    ProviderName,
    RepositoryMethod,
    RepositoryName,
)
from src.domain.errors import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidPasswordError,
    ProviderError,
    RepositoryError,
)
from src.domain.protocols import NewUser
from src.domain.value_objects import Id, PasswordHash

NEW_USER_ID = Id("0190f6c2-0000-7000-8000-000000000001")


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = Success(value=None)
    repo.save.return_value = Success(value=NEW_USER_ID)
    return repo


@pytest.fixture
def password_service():
    service = AsyncMock()
    service.encrypt.return_value = Success(value=PasswordHash("$2b$10$hashed"))
    return service


@pytest.fixture
def handler(user_repo, password_service, mock_timing_logger, mock_logger):
    return SignUpHandler(
        user_repo=user_repo,
        password_service=password_service,
        timing_logger=mock_timing_logger,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestSignUpHandlerSuccess:
    """Test successful sign-up scenarios."""

    @pytest.mark.asyncio
    async def test_sign_up_returns_new_user_id(self, handler):
        # Act
        result = await handler.execute(
            SignUp(email="New@Example.com", password="password1")
        )

        # Assert
        assert result == Success(value=AuthenticatedUser(user_id=NEW_USER_ID))

    @pytest.mark.asyncio
    async def test_sign_up_saves_normalized_email_and_hash(
        self, handler, user_repo, password_service
    ):
        await handler.execute(SignUp(email=" New@Example.com", password="password1"))

        password_service.encrypt.assert_awaited_once()
        assert password_service.encrypt.await_args.args[0].value == "password1"

        user_repo.find_by_email.assert_awaited_once()
        assert user_repo.find_by_email.await_args.args[0].value == "new@example.com"
        saved: NewUser = user_repo.save.await_args.args[0]
        assert saved.email.value == "new@example.com"
        assert saved.password == PasswordHash("$2b$10$hashed")
        assert saved.is_email_validated is False


@pytest.mark.unit
class TestSignUpHandlerValidation:
    """Test input validation short-circuits."""

    @pytest.mark.asyncio
    async def test_short_password_fails_before_any_call(
        self, handler, user_repo, password_service
    ):
        result = await handler.execute(SignUp(email="a@b.com", password="short"))

        assert result == Failure(
            error=InvalidPasswordError(
                motive=InvalidPasswordMotive.IS_LESS_THAN_8_CHARACTERS
            )
        )
        password_service.encrypt.assert_not_awaited()
        user_repo.find_by_email.assert_not_awaited()
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_email_fails_after_hashing(
        self, handler, user_repo, password_service
    ):
        result = await handler.execute(
            SignUp(email="not-an-email", password="password1")
        )

        assert result == Failure(error=InvalidEmailError(email="not-an-email"))
        password_service.encrypt.assert_awaited_once()
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected_without_write(
        self, handler, user_repo, user
    ):
        # Arrange
        user_repo.find_by_email.return_value = Success(value=user)

        # Act
        result = await handler.execute(
            SignUp(email="USER@example.com", password="password1")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error == EmailAlreadyExistsError(email="user@example.com")
        assert result.error.status == StatusError.CONFLICT
        user_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestSignUpHandlerCollaboratorFailures:
    """Test provider and repository failures propagate unchanged."""

    @pytest.mark.asyncio
    async def test_hashing_failure_is_returned(
        self, handler, user_repo, password_service
    ):
        error = ProviderError(
            name=ProviderName.PASSWORD,
            method=ProviderMethod.ENCRYPT,
            external_name="bcrypt",
        )
        password_service.encrypt.return_value = Failure(error=error)

        result = await handler.execute(SignUp(email="a@b.com", password="password1"))

        assert result == Failure(error=error)
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lookup_failure_is_returned(self, handler, user_repo):
        error = RepositoryError(
            name=RepositoryName.USERS, method=RepositoryMethod.FIND_BY_EMAIL
        )
        user_repo.find_by_email.return_value = Failure(error=error)

        result = await handler.execute(SignUp(email="a@b.com", password="password1"))

        assert result == Failure(error=error)
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_conflict_is_returned(self, handler, user_repo):
        # Concurrent sign-up lost the race at the unique constraint.
        error = RepositoryError(
            name=RepositoryName.USERS,
            method=RepositoryMethod.SAVE,
            status=StatusError.CONFLICT,
        )
        user_repo.save.return_value = Failure(error=error)

        result = await handler.execute(SignUp(email="a@b.com", password="password1"))

        assert result == Failure(error=error)
