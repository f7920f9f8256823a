"""Repository dependency factories.

Repositories are request-scoped: each request gets fresh instances sharing
the request's AsyncSession.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_id_service, get_logger

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        TokenForgotPasswordRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Users repository bound to the request session.

    User ids come from the shared IdService.
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(
        session=session, id_service=get_id_service(), logger=get_logger()
    )


async def get_token_forgot_password_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "TokenForgotPasswordRepository":
    """Forgot-password tokens repository bound to the request session.

    Token ids come from the shared IdService.
    """
    from src.infrastructure.persistence.repositories import (
        TokenForgotPasswordRepository,
    )

    return TokenForgotPasswordRepository(
        session=session,
        id_service=get_id_service(),
        logger=get_logger(),
    )
