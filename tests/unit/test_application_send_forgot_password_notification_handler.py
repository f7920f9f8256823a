"""Unit tests for SendForgotPasswordNotificationHandler.

Tests cover:
- Known email -> token generated and saved with a 2-hour expiry
- Unknown email -> InvalidEmailError (not not-found), nothing generated
- Malformed email -> InvalidEmailError without lookup
- Generator and repository failures propagate
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time

from src.application.commands import SendForgotPasswordNotification
from src.application.commands.handlers.send_forgot_password_notification_handler import (
    SendForgotPasswordNotificationHandler,
)
from src.core.enums import StatusError
from src.core.result import Failure, Success
from src.domain.entities import TokenForgotPassword
from src.domain.enums import (
    ProviderMethod,
    ProviderName,
    RepositoryMethod,
    RepositoryName,
)
from src.domain.errors import InvalidEmailError, ProviderError, RepositoryError


@pytest.fixture
def user_repo(user):
    repo = AsyncMock()
    repo.find_by_email.return_value = Success(value=user)
    return repo


@pytest.fixture
def token_repo():
    repo = AsyncMock()
    repo.save.return_value = Success(value=None)
    return repo


@pytest.fixture
def token_generator():
    generator = AsyncMock()
    generator.generate.return_value = Success(value="K7Q2ZD")
    return generator


@pytest.fixture
def handler(user_repo, token_repo, token_generator, mock_timing_logger, mock_logger):
    return SendForgotPasswordNotificationHandler(
        user_repo=user_repo,
        token_repo=token_repo,
        token_generator=token_generator,
        timing_logger=mock_timing_logger,
        logger=mock_logger,
        token_length=6,
        token_ttl=timedelta(hours=2),
    )


@pytest.mark.unit
class TestSendForgotPasswordNotificationSuccess:
    """Test token issuance for a known user."""

    @pytest.mark.asyncio
    @freeze_time("2026-10-19 09:00:00")
    async def test_saves_token_expiring_in_two_hours(
        self, handler, token_repo, token_generator, user
    ):
        # Act
        result = await handler.execute(
            SendForgotPasswordNotification(email="user@example.com")
        )

        # Assert
        assert result == Success(value=None)
        token_generator.generate.assert_awaited_once_with(6)
        token_repo.save.assert_awaited_once_with(
            TokenForgotPassword(
                value="K7Q2ZD",
                expiration_date=datetime(2026, 10, 19, 11, 0, tzinfo=UTC),
                user_id=user.id,
            )
        )

    @pytest.mark.asyncio
    async def test_token_value_is_not_logged(self, handler, mock_logger):
        await handler.execute(SendForgotPasswordNotification(email="user@example.com"))

        for call in mock_logger.info.call_args_list:
            assert "K7Q2ZD" not in str(call)


@pytest.mark.unit
class TestSendForgotPasswordNotificationFailures:
    """Test rejected and failing requests."""

    @pytest.mark.asyncio
    async def test_unknown_email_is_invalid(
        self, handler, user_repo, token_generator, token_repo
    ):
        user_repo.find_by_email.return_value = Success(value=None)

        result = await handler.execute(
            SendForgotPasswordNotification(email="ghost@example.com")
        )

        assert result == Failure(error=InvalidEmailError(email="ghost@example.com"))
        assert result.error.status == StatusError.INVALID
        token_generator.generate.assert_not_awaited()
        token_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_email_is_reported_normalized(self, handler, user_repo):
        user_repo.find_by_email.return_value = Success(value=None)

        result = await handler.execute(
            SendForgotPasswordNotification(email="  Ghost@Example.COM ")
        )

        assert result == Failure(error=InvalidEmailError(email="ghost@example.com"))
        assert result.error.message == "This email is invalid: ghost@example.com."

    @pytest.mark.asyncio
    async def test_malformed_email_skips_lookup(self, handler, user_repo):
        result = await handler.execute(SendForgotPasswordNotification(email="nope"))

        assert result == Failure(error=InvalidEmailError(email="nope"))
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generator_failure_is_returned(
        self, handler, token_generator, token_repo
    ):
        error = ProviderError(
            name=ProviderName.TOKEN,
            method=ProviderMethod.GENERATE,
            external_name="secrets",
        )
        token_generator.generate.return_value = Failure(error=error)

        result = await handler.execute(
            SendForgotPasswordNotification(email="user@example.com")
        )

        assert result == Failure(error=error)
        token_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_failure_is_returned(self, handler, token_repo):
        error = RepositoryError(
            name=RepositoryName.TOKENS_FORGOT_PASSWORD,
            method=RepositoryMethod.SAVE,
            external_name="sqlalchemy",
        )
        token_repo.save.return_value = Failure(error=error)

        result = await handler.execute(
            SendForgotPasswordNotification(email="user@example.com")
        )

        assert result == Failure(error=error)
