"""Token generation protocols.

Three token capabilities used by the use cases:
    - TokenGenerationProtocol: signed access tokens (JWT) for a user id
    - RandomTokenProtocol: short opaque tokens (forgot-password codes)
    - IdGenerationProtocol: new entity identifiers
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import ProviderError
from src.domain.value_objects import Id


class TokenGenerationProtocol(Protocol):
    """Access token signing and verification.

    Implementations:
        - JWTService: PyJWT, HMAC-signed, 'sub' claim holds the user id
    """

    async def generate_jwt(self, user_id: Id) -> Result[str, ProviderError]:
        """Issue a signed access token for the user.

        Args:
            user_id: Resolved user identifier.

        Returns:
            Success(token) or Failure(ProviderError).
        """
        ...

    async def verify_jwt(self, token: str) -> Result[Id, ProviderError]:
        """Verify a token and return the user id it was issued for.

        Args:
            token: Encoded access token.

        Returns:
            Success(Id) or Failure(ProviderError) for invalid, expired or
            tampered tokens.
        """
        ...


class RandomTokenProtocol(Protocol):
    """Random opaque token generation."""

    async def generate(self, amount_characters: int) -> Result[str, ProviderError]:
        """Generate a random token of exactly `amount_characters` characters."""
        ...


class IdGenerationProtocol(Protocol):
    """Identifier generation."""

    async def generate_id(self) -> Result[Id, ProviderError]:
        """Generate a new unique identifier."""
        ...
