"""TokenForgotPasswordRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture. The row id comes from the injected
IdGenerationProtocol, so its failures surface here as ProviderError.
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, Success
from src.domain.entities import TokenForgotPassword
from src.domain.enums import RepositoryMethod, RepositoryName
from src.domain.errors import ProviderError, RepositoryError
from src.domain.protocols import IdGenerationProtocol, LoggerProtocol
from src.infrastructure.persistence.models.token_forgot_password import (
    TokenForgotPasswordModel,
)

EXTERNAL_NAME = "sqlalchemy"


class TokenForgotPasswordRepository:
    """SQLAlchemy implementation of TokenForgotPasswordRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(
        self,
        session: AsyncSession,
        id_service: IdGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self.session = session
        self._id_service = id_service
        self._logger = logger

    async def save(
        self, token: TokenForgotPassword
    ) -> Result[None, RepositoryError | ProviderError]:
        """Persist a forgot-password token.

        Returns:
            Success(None), Failure(ProviderError) if no id could be generated,
            Failure(RepositoryError) if the insert fails.
        """
        id_result = await self._id_service.generate_id()
        if isinstance(id_result, Failure):
            return id_result

        token_model = self._to_model(token, UUID(id_result.value.value))
        try:
            self.session.add(token_model)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._logger.error(
                "Forgot password token repository operation failed",
                error=e,
                method=RepositoryMethod.SAVE.value,
            )
            return Failure(
                error=RepositoryError(
                    name=RepositoryName.TOKENS_FORGOT_PASSWORD,
                    method=RepositoryMethod.SAVE,
                    external_name=EXTERNAL_NAME,
                    cause=e,
                )
            )

        return Success(value=None)

    def _to_model(
        self, token: TokenForgotPassword, token_id: UUID
    ) -> TokenForgotPasswordModel:
        return TokenForgotPasswordModel(
            id=token_id,
            user_id=UUID(token.user_id.value),
            value=token.value,
            expiration_date=token.expiration_date,
        )
