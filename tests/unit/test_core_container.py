"""Unit tests for the dependency container.

Tests cover:
- App-scoped factories return cached singletons of the right adapters
- Handler factories compose handlers from injected repositories
"""

from unittest.mock import MagicMock

import pytest

from src.application.commands.handlers.credentials_sign_in_handler import (
    CredentialsSignInHandler,
)
from src.application.commands.handlers.send_forgot_password_notification_handler import (
    SendForgotPasswordNotificationHandler,
)
from src.application.commands.handlers.sign_in_handler import SignInHandler
from src.core.container import (
    get_credentials_sign_in_handler,
    get_facebook_api,
    get_facebook_sign_in_handler,
    get_google_api,
    get_google_sign_in_handler,
    get_logger,
    get_password_service,
    get_send_forgot_password_notification_handler,
    get_sign_in_handler,
    get_timing_logger,
    get_token_service,
)
from src.infrastructure.logging import ConsoleAdapter, TimingLoggerAdapter
from src.infrastructure.providers import FacebookApiAdapter, GoogleApiAdapter
from src.infrastructure.security import BcryptPasswordService, JWTService


@pytest.mark.unit
class TestInfrastructureFactories:
    """Test app-scoped singletons."""

    def test_logger_is_cached_console_adapter(self):
        assert isinstance(get_logger(), ConsoleAdapter)
        assert get_logger() is get_logger()

    def test_timing_logger(self):
        assert isinstance(get_timing_logger(), TimingLoggerAdapter)

    def test_security_services(self):
        assert isinstance(get_password_service(), BcryptPasswordService)
        assert isinstance(get_token_service(), JWTService)
        assert get_token_service() is get_token_service()

    def test_social_adapters(self):
        assert isinstance(get_facebook_api(), FacebookApiAdapter)
        assert isinstance(get_google_api(), GoogleApiAdapter)


@pytest.mark.unit
class TestHandlerFactories:
    """Test request-scoped handler composition."""

    @pytest.mark.asyncio
    async def test_sign_in_handler_composes_sub_handlers(self):
        user_repo = MagicMock()

        credentials = await get_credentials_sign_in_handler(user_repo=user_repo)
        facebook = await get_facebook_sign_in_handler(user_repo=user_repo)
        google = await get_google_sign_in_handler(user_repo=user_repo)
        handler = await get_sign_in_handler(
            credentials_sign_in=credentials,
            facebook_sign_in=facebook,
            google_sign_in=google,
        )

        assert isinstance(credentials, CredentialsSignInHandler)
        assert isinstance(handler, SignInHandler)

    @pytest.mark.asyncio
    async def test_forgot_password_handler(self):
        handler = await get_send_forgot_password_notification_handler(
            user_repo=MagicMock(), token_repo=MagicMock()
        )

        assert isinstance(handler, SendForgotPasswordNotificationHandler)
