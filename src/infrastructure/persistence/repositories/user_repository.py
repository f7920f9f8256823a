"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel. New user ids come
from the injected IdGenerationProtocol, so its failures surface as
ProviderError.

Errors:
    Every SQLAlchemyError is rolled back, logged, and returned as a
    RepositoryError. An IntegrityError on insert or update (duplicate email or
    already linked social account) is returned with status conflict.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import StatusError
from src.core.result import Failure, Result, Success
from src.domain.entities import SocialAccount, User
from src.domain.enums import RepositoryMethod, RepositoryName
from src.domain.errors import ProviderError, RepositoryError
from src.domain.protocols import (
    IdGenerationProtocol,
    LoggerProtocol,
    NewSocialUser,
    NewUser,
    UserUpdate,
)
from src.domain.value_objects import Email, Id, PasswordHash
from src.infrastructure.persistence.models.user import UserModel

EXTERNAL_NAME = "sqlalchemy"


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session, id_service, logger)
        ...     result = await repo.find_by_email(Email("user@example.com"))
    """

    def __init__(
        self,
        session: AsyncSession,
        id_service: IdGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
            id_service: Generates ids for new users.
            logger: Structured logger for wrapped failures.
        """
        self.session = session
        self._id_service = id_service
        self._logger = logger

    async def find_by_email(self, email: Email) -> Result[User | None, RepositoryError]:
        """Find user by email address.

        Emails are stored lowercase, so the lookup is an exact match.

        Returns:
            Success(User) if found, Success(None) otherwise.
        """
        try:
            stmt = select(UserModel).where(UserModel.email == email.value)
            result = await self.session.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._failure(RepositoryMethod.FIND_BY_EMAIL, e)

        if user_model is None:
            return Success(value=None)
        return Success(value=self._to_domain(user_model))

    async def save(
        self, user: NewUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        """Create a password user.

        Returns:
            Success(Id) of the new user.
        """
        return await self._insert(
            RepositoryMethod.SAVE,
            email=user.email.value,
            password_hash=user.password.value,
            is_email_validated=user.is_email_validated,
        )

    async def save_with_facebook_account(
        self, user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        return await self._insert(
            RepositoryMethod.SAVE_WITH_FACEBOOK_ACCOUNT,
            email=user.email.value,
            is_email_validated=user.is_email_validated,
            facebook_account_id=user.account_id,
        )

    async def save_with_google_account(
        self, user: NewSocialUser
    ) -> Result[Id, RepositoryError | ProviderError]:
        return await self._insert(
            RepositoryMethod.SAVE_WITH_GOOGLE_ACCOUNT,
            email=user.email.value,
            is_email_validated=user.is_email_validated,
            google_account_id=user.account_id,
        )

    async def update(self, update: UserUpdate) -> Result[None, RepositoryError]:
        """Attach social account links to an existing user.

        Fields left as None in `update` are not touched.

        Returns:
            Success(None), or Failure(RepositoryError) when the user does not
            exist or the write fails.
        """
        try:
            stmt = select(UserModel).where(UserModel.id == UUID(update.user_id.value))
            result = await self.session.execute(stmt)
            user_model = result.scalar_one()

            if update.facebook_account_id is not None:
                user_model.facebook_account_id = update.facebook_account_id
            if update.google_account_id is not None:
                user_model.google_account_id = update.google_account_id

            await self.session.commit()
        except SQLAlchemyError as e:
            return await self._failure(RepositoryMethod.UPDATE, e)

        return Success(value=None)

    async def _insert(
        self, method: RepositoryMethod, **columns: Any
    ) -> Result[Id, RepositoryError | ProviderError]:
        id_result = await self._id_service.generate_id()
        if isinstance(id_result, Failure):
            return id_result

        user_id = UUID(id_result.value.value)
        # Social-only users never sign in with a password. Their id stands in
        # for the hash; it is not bcrypt, so no comparison can match it.
        columns.setdefault("password_hash", str(user_id))
        user_model = UserModel(id=user_id, **columns)
        try:
            self.session.add(user_model)
            await self.session.commit()
        except SQLAlchemyError as e:
            return await self._failure(method, e)

        return Success(value=id_result.value)

    async def _failure(
        self, method: RepositoryMethod, error: SQLAlchemyError
    ) -> Failure[RepositoryError]:
        await self.session.rollback()
        self._logger.error(
            "User repository operation failed",
            error=error,
            method=method.value,
        )
        status = (
            StatusError.CONFLICT
            if isinstance(error, IntegrityError)
            else StatusError.REPOSITORY_ERROR
        )
        return Failure(
            error=RepositoryError(
                name=RepositoryName.USERS,
                method=method,
                external_name=EXTERNAL_NAME,
                cause=error,
                status=status,
            )
        )

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=Id(str(user_model.id)),
            email=Email(user_model.email),
            password=PasswordHash(user_model.password_hash),
            is_email_validated=user_model.is_email_validated,
            facebook_account=(
                SocialAccount(id=user_model.facebook_account_id)
                if user_model.facebook_account_id
                else None
            ),
            google_account=(
                SocialAccount(id=user_model.google_account_id)
                if user_model.google_account_id
                else None
            ),
        )
