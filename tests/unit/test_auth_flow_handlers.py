"""Sign-up then sign-in flows across handlers.

Tests cover:
- Sign up, then sign in with the same credentials (any email casing)
- Second sign-up with the same email is rejected
- Wrong password after sign-up is rejected
- Social sign-in for a password user links the account exactly once
- Password sign-in for a social-only user is a password mismatch

Architecture:
- Real handlers wired together
- In-memory user repository and a reversible fake password service
"""

from dataclasses import replace
from uuid import uuid4

import pytest

from src.application.commands import (
    CredentialsSignIn,
    SignIn,
    SignUp,
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
from src.application.commands.handlers.sign_in_handler import SignInHandler
from src.application.commands.handlers.sign_up_handler import SignUpHandler
from src.core.result import Failure, Result, Success
from src.domain.entities import SocialAccount, SocialIdentity, User
from src.domain.enums import SignInErrorMotive
from src.domain.errors import EmailAlreadyExistsError, ProviderError, SignInError
from src.domain.protocols import NewSocialUser, NewUser, UserUpdate
from src.domain.value_objects import (
    Email,
    Id,
    PasswordHash,
    ValidatedPassword,
)


class InMemoryUserRepository:
    """Dict-backed UserRepository keyed by email."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.writes = 0

    async def find_by_email(self, email: Email):
        return Success(value=self.users.get(email.value))

    async def save(self, user: NewUser):
        return self._store(
            User(
                id=Id(f"user-{len(self.users) + 1}"),
                email=Email(user.email.value),
                password=user.password,
                is_email_validated=user.is_email_validated,
            )
        )

    async def save_with_facebook_account(self, user: NewSocialUser):
        return self._store(self._social(user, facebook=True))

    async def save_with_google_account(self, user: NewSocialUser):
        return self._store(self._social(user, facebook=False))

    async def update(self, update: UserUpdate):
        self.writes += 1
        for email, stored in self.users.items():
            if stored.id == update.user_id:
                if update.facebook_account_id is not None:
                    stored = replace(
                        stored,
                        facebook_account=SocialAccount(id=update.facebook_account_id),
                    )
                if update.google_account_id is not None:
                    stored = replace(
                        stored,
                        google_account=SocialAccount(id=update.google_account_id),
                    )
                self.users[email] = stored
        return Success(value=None)

    def _social(self, user: NewSocialUser, *, facebook: bool) -> User:
        account = SocialAccount(id=user.account_id)
        return User(
            id=Id(f"user-{len(self.users) + 1}"),
            email=user.email,
            password=PasswordHash(str(uuid4())),
            is_email_validated=user.is_email_validated,
            facebook_account=account if facebook else None,
            google_account=None if facebook else account,
        )

    def _store(self, user: User):
        self.writes += 1
        self.users[user.email.value] = user
        return Success(value=user.id)


class ReversingPasswordService:
    """Fake hashing: the 'hash' is the reversed plaintext."""

    async def encrypt(self, password: ValidatedPassword):
        return Success(value=PasswordHash(password.value[::-1]))

    async def compare(self, password: ValidatedPassword, password_hash: PasswordHash):
        return Success(value=password.value[::-1] == password_hash.value)


class FakeTokenService:
    async def generate_jwt(self, user_id: Id) -> Result[str, ProviderError]:
        return Success(value=f"token-for-{user_id.value}")


class FakeSocialApi:
    def __init__(self, identity: SocialIdentity) -> None:
        self.identity = identity

    async def load_user(self, access_token: str):
        return Success(value=self.identity)


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def facebook_api():
    return FakeSocialApi(SocialIdentity(id="fb-99", email="USER@example.com"))


@pytest.fixture
def sign_up(repo, mock_timing_logger, mock_logger):
    return SignUpHandler(
        user_repo=repo,
        password_service=ReversingPasswordService(),
        timing_logger=mock_timing_logger,
        logger=mock_logger,
    )


@pytest.fixture
def sign_in(repo, facebook_api, mock_timing_logger, mock_logger):
    return SignInHandler(
        credentials_sign_in=CredentialsSignInHandler(
            user_repo=repo,
            password_service=ReversingPasswordService(),
            timing_logger=mock_timing_logger,
            logger=mock_logger,
        ),
        facebook_sign_in=FacebookSignInHandler(
            user_repo=repo,
            facebook_api=facebook_api,
            timing_logger=mock_timing_logger,
            logger=mock_logger,
        ),
        google_sign_in=GoogleSignInHandler(
            user_repo=repo,
            google_api=FakeSocialApi(SocialIdentity(id="g-1", email="g@example.com")),
            timing_logger=mock_timing_logger,
            logger=mock_logger,
        ),
        token_service=FakeTokenService(),
        timing_logger=mock_timing_logger,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestSignUpThenSignIn:
    """Test the password account lifecycle."""

    @pytest.mark.asyncio
    async def test_sign_in_after_sign_up(self, sign_up, sign_in):
        # Arrange
        sign_up_result = await sign_up.execute(
            SignUp(email="User@Example.com", password="password1")
        )
        assert isinstance(sign_up_result, Success)

        # Act
        result = await sign_in.execute(
            SignIn(
                credentials=CredentialsSignIn(
                    email="user@example.com", password="password1"
                )
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.access_token == "token-for-user-1"

    @pytest.mark.asyncio
    async def test_sign_up_result_can_sign_in_directly(self, sign_up, sign_in):
        sign_up_result = await sign_up.execute(
            SignUp(email="user@example.com", password="password1")
        )

        result = await sign_in.execute(SignIn(user=sign_up_result.value))

        assert result.value.access_token == "token-for-user-1"

    @pytest.mark.asyncio
    async def test_second_sign_up_is_rejected(self, sign_up, repo):
        await sign_up.execute(SignUp(email="user@example.com", password="password1"))

        result = await sign_up.execute(
            SignUp(email="USER@example.com", password="password2")
        )

        assert result == Failure(error=EmailAlreadyExistsError(email="user@example.com"))
        assert len(repo.users) == 1

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, sign_up, sign_in):
        await sign_up.execute(SignUp(email="user@example.com", password="password1"))

        result = await sign_in.execute(
            SignIn(
                credentials=CredentialsSignIn(
                    email="user@example.com", password="password2"
                )
            )
        )

        assert result == Failure(
            error=SignInError(motive=SignInErrorMotive.PASSWORD_NOT_MATCH)
        )


@pytest.mark.unit
class TestSocialLinking:
    """Test social sign-in against an existing password account."""

    @pytest.mark.asyncio
    async def test_facebook_links_once_then_reuses(self, sign_up, sign_in, repo):
        # Arrange
        await sign_up.execute(SignUp(email="user@example.com", password="password1"))
        writes_after_sign_up = repo.writes

        # Act
        first = await sign_in.execute(SignIn(facebook_access_token="fb-token"))
        second = await sign_in.execute(SignIn(facebook_access_token="fb-token"))

        # Assert
        assert first.value.access_token == "token-for-user-1"
        assert second.value.access_token == "token-for-user-1"
        assert repo.users["user@example.com"].has_facebook_account("fb-99")
        assert repo.writes == writes_after_sign_up + 1

    @pytest.mark.asyncio
    async def test_google_creates_new_user(self, sign_in, repo):
        result = await sign_in.execute(SignIn(google_access_token="g-token"))

        assert isinstance(result, Success)
        created = repo.users["g@example.com"]
        assert created.is_email_validated is True
        assert created.has_google_account("g-1")

    @pytest.mark.asyncio
    async def test_social_only_user_cannot_use_credentials(self, sign_in, repo):
        await sign_in.execute(SignIn(google_access_token="g-token"))

        result = await sign_in.execute(
            SignIn(
                credentials=CredentialsSignIn(
                    email="g@example.com", password="password1"
                )
            )
        )

        assert result == Failure(
            error=SignInError(motive=SignInErrorMotive.PASSWORD_NOT_MATCH)
        )
