"""Unit tests for domain entities.

Tests cover:
- User social account checks
- TokenForgotPassword issuance and expiry
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from src.domain.entities import SocialAccount, SocialIdentity, TokenForgotPassword
from src.domain.value_objects import Id


@pytest.mark.unit
class TestUser:
    """Test User entity helpers."""

    def test_new_user_has_no_social_accounts(self, user):
        assert user.is_email_validated is False
        assert user.has_facebook_account("fb-1") is False
        assert user.has_google_account("g-1") is False

    def test_has_facebook_account_matches_exact_id(self, user):
        user.facebook_account = SocialAccount(id="fb-1")

        assert user.has_facebook_account("fb-1") is True
        assert user.has_facebook_account("fb-2") is False
        assert user.has_google_account("fb-1") is False

    def test_has_google_account_matches_exact_id(self, user):
        user.google_account = SocialAccount(id="g-1")

        assert user.has_google_account("g-1") is True
        assert user.has_google_account("g-2") is False


@pytest.mark.unit
class TestSocialIdentity:
    def test_name_defaults_to_empty(self):
        identity = SocialIdentity(id="1", email="a@b.com")

        assert identity.name == ""


@pytest.mark.unit
class TestTokenForgotPassword:
    """Test forgot-password token lifecycle."""

    def test_issue_sets_expiry_from_now(self):
        now = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)

        token = TokenForgotPassword.issue(
            value="ABC123", user_id=Id("u-1"), ttl=timedelta(hours=2), now=now
        )

        assert token.value == "ABC123"
        assert token.user_id == Id("u-1")
        assert token.expiration_date == datetime(2026, 10, 19, 11, 0, tzinfo=UTC)

    @freeze_time("2026-10-19 09:00:00")
    def test_issue_defaults_to_two_hours_from_current_time(self):
        token = TokenForgotPassword.issue(value="ABC123", user_id=Id("u-1"))

        assert token.expiration_date == datetime(2026, 10, 19, 11, 0, tzinfo=UTC)

    def test_is_expired(self):
        now = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)
        token = TokenForgotPassword.issue(value="ABC123", user_id=Id("u-1"), now=now)

        assert token.is_expired(now + timedelta(hours=1, minutes=59)) is False
        assert token.is_expired(now + timedelta(hours=2)) is True
