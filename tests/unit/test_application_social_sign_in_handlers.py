"""Unit tests for FacebookSignInHandler and GoogleSignInHandler.

Tests cover:
- First sign-in creates a linked user (email validated)
- Existing user without the link gets it attached
- Existing linked user is returned without any write
- A different account of the same provider is never replaced
- Provider identity failures propagate
- Repository failures propagate

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Same scenarios run against both providers
"""

from unittest.mock import AsyncMock

import pytest

from src.application.commands import AuthenticatedUser, FacebookSignIn, GoogleSignIn
from src.application.commands.handlers.facebook_sign_in_handler import (
    FacebookSignInHandler,
)
from src.application.commands.handlers.google_sign_in_handler import (
    GoogleSignInHandler,
)
from src.core.result import Failure, Success
from src.domain.entities import SocialAccount, SocialIdentity
from src.domain.enums import RepositoryMethod, RepositoryName
from src.domain.errors import (
    LoadUserFacebookApiError,
    LoadUserGoogleApiError,
    RepositoryError,
)
from src.domain.protocols import NewSocialUser, UserUpdate
from src.domain.value_objects import Email, Id

NEW_USER_ID = Id("0190f6c2-0000-7000-8000-000000000002")
IDENTITY = SocialIdentity(id="social-42", email="User@Example.com", name="User")


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = Success(value=None)
    repo.save_with_facebook_account.return_value = Success(value=NEW_USER_ID)
    repo.save_with_google_account.return_value = Success(value=NEW_USER_ID)
    repo.update.return_value = Success(value=None)
    return repo


@pytest.fixture
def social_api():
    api = AsyncMock()
    api.load_user.return_value = Success(value=IDENTITY)
    return api


@pytest.fixture(params=["facebook", "google"])
def provider(request, user_repo, social_api, mock_timing_logger, mock_logger):
    """Handler under test plus per-provider expectations."""
    if request.param == "facebook":
        handler = FacebookSignInHandler(
            user_repo=user_repo,
            facebook_api=social_api,
            timing_logger=mock_timing_logger,
            logger=mock_logger,
        )
        return {
            "handler": handler,
            "command": FacebookSignIn(access_token="fb-token"),
            "token": "fb-token",
            "save": user_repo.save_with_facebook_account,
            "other_save": user_repo.save_with_google_account,
            "link_field": "facebook_account",
            "update": UserUpdate(user_id=Id("user-1"), facebook_account_id="social-42"),
            "load_error": LoadUserFacebookApiError(),
        }
    handler = GoogleSignInHandler(
        user_repo=user_repo,
        google_api=social_api,
        timing_logger=mock_timing_logger,
        logger=mock_logger,
    )
    return {
        "handler": handler,
        "command": GoogleSignIn(access_token="g-token"),
        "token": "g-token",
        "save": user_repo.save_with_google_account,
        "other_save": user_repo.save_with_facebook_account,
        "link_field": "google_account",
        "update": UserUpdate(user_id=Id("user-1"), google_account_id="social-42"),
        "load_error": LoadUserGoogleApiError(),
    }


@pytest.mark.unit
class TestSocialSignInCreate:
    """Test first sign-in with an unknown email."""

    @pytest.mark.asyncio
    async def test_creates_linked_user(self, provider, social_api, user_repo):
        # Act
        result = await provider["handler"].execute(provider["command"])

        # Assert
        assert result == Success(value=AuthenticatedUser(user_id=NEW_USER_ID))
        social_api.load_user.assert_awaited_once_with(provider["token"])
        user_repo.find_by_email.assert_awaited_once_with(Email("user@example.com"))
        provider["save"].assert_awaited_once_with(
            NewSocialUser(email=Email("user@example.com"), account_id="social-42")
        )
        provider["other_save"].assert_not_awaited()
        user_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_created_user_has_validated_email(self, provider):
        await provider["handler"].execute(provider["command"])

        new_user: NewSocialUser = provider["save"].await_args.args[0]
        assert new_user.is_email_validated is True

    @pytest.mark.asyncio
    async def test_save_failure_is_returned(self, provider):
        error = RepositoryError(name=RepositoryName.USERS, method=RepositoryMethod.SAVE)
        provider["save"].return_value = Failure(error=error)

        result = await provider["handler"].execute(provider["command"])

        assert result == Failure(error=error)


@pytest.mark.unit
class TestSocialSignInExistingUser:
    """Test sign-in for an email that already has a user."""

    @pytest.mark.asyncio
    async def test_links_account_to_existing_user(self, provider, user_repo, user):
        # Arrange
        user.id = Id("user-1")
        user_repo.find_by_email.return_value = Success(value=user)

        # Act
        result = await provider["handler"].execute(provider["command"])

        # Assert
        assert result == Success(value=AuthenticatedUser(user_id=Id("user-1")))
        user_repo.update.assert_awaited_once_with(provider["update"])
        provider["save"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_already_linked_user_is_returned_without_write(
        self, provider, user_repo, user
    ):
        # Arrange
        user.id = Id("user-1")
        setattr(user, provider["link_field"], SocialAccount(id="social-42"))
        user_repo.find_by_email.return_value = Success(value=user)

        # Act
        result = await provider["handler"].execute(provider["command"])

        # Assert
        assert result == Success(value=AuthenticatedUser(user_id=Id("user-1")))
        user_repo.update.assert_not_awaited()
        provider["save"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_linked_account_is_kept(self, provider, user_repo, user):
        setattr(user, provider["link_field"], SocialAccount(id="social-OLD"))
        user_repo.find_by_email.return_value = Success(value=user)

        result = await provider["handler"].execute(provider["command"])

        assert result == Success(value=AuthenticatedUser(user_id=user.id))
        assert getattr(user, provider["link_field"]) == SocialAccount(id="social-OLD")
        user_repo.update.assert_not_awaited()
        provider["save"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_failure_is_returned(self, provider, user_repo, user):
        user_repo.find_by_email.return_value = Success(value=user)
        error = RepositoryError(
            name=RepositoryName.USERS, method=RepositoryMethod.UPDATE
        )
        user_repo.update.return_value = Failure(error=error)

        result = await provider["handler"].execute(provider["command"])

        assert result == Failure(error=error)


@pytest.mark.unit
class TestSocialSignInProviderFailure:
    """Test identity loading failures."""

    @pytest.mark.asyncio
    async def test_load_failure_is_returned_without_lookup(
        self, provider, social_api, user_repo
    ):
        social_api.load_user.return_value = Failure(error=provider["load_error"])

        result = await provider["handler"].execute(provider["command"])

        assert result == Failure(error=provider["load_error"])
        user_repo.find_by_email.assert_not_awaited()
