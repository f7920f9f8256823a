"""TokenForgotPasswordRepository protocol for forgot-password tokens.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities import TokenForgotPassword
from src.domain.errors import ProviderError, RepositoryError


class TokenForgotPasswordRepository(Protocol):
    """Forgot-password token repository protocol (port).

    Implementations generate the row id themselves, so id generation failures
    surface here as ProviderError.
    """

    async def save(
        self, token: TokenForgotPassword
    ) -> Result[None, RepositoryError | ProviderError]:
        ...
