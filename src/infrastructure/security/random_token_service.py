"""Random token service (adapter).

Implements RandomTokenProtocol with the secrets module. Tokens are short codes
a user can type (uppercase letters and digits), used for forgot-password
notifications.
"""

import secrets

from src.core.constants import FORGOT_PASSWORD_TOKEN_ALPHABET
from src.core.result import Failure, Result, Success
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import ProviderError


class RandomTokenService:
    """Random token generation service.

    Example:
        >>> service = RandomTokenService()
        >>> result = await service.generate(6)
        >>> len(result.value)
        6
    """

    def __init__(self, alphabet: str = FORGOT_PASSWORD_TOKEN_ALPHABET) -> None:
        self._alphabet = alphabet

    async def generate(self, amount_characters: int) -> Result[str, ProviderError]:
        """Generate a token of exactly `amount_characters` characters.

        Returns:
            Success(token), or Failure(ProviderError) for a non-positive length.
        """
        if amount_characters <= 0:
            return Failure(
                error=ProviderError(
                    name=ProviderName.TOKEN,
                    method=ProviderMethod.GENERATE,
                    external_name="secrets",
                )
            )
        token = "".join(
            secrets.choice(self._alphabet) for _ in range(amount_characters)
        )
        return Success(value=token)
