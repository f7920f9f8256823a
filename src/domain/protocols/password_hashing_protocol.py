"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides concrete implementations (bcrypt).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - Failures are returned as ProviderError, never raised
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import ProviderError
from src.domain.value_objects import PasswordHash, ValidatedPassword


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        result = await password_service.encrypt(password)
        match result:
            case Success(value=password_hash):
                ...
            case Failure(error=error):
                return Failure(error=error)
    """

    async def encrypt(
        self, password: ValidatedPassword
    ) -> Result[PasswordHash, ProviderError]:
        """Hash a validated plaintext password.

        Args:
            password: Plaintext that passed Password.validate.

        Returns:
            Success(PasswordHash) or Failure(ProviderError).
        """
        ...

    async def compare(
        self, password: ValidatedPassword, password_hash: PasswordHash
    ) -> Result[bool, ProviderError]:
        """Check a plaintext password against a stored hash.

        Args:
            password: Plaintext that passed Password.validate.
            password_hash: Hash from the users repository.

        Returns:
            Success(True) when they match, Success(False) when they do not,
            Failure(ProviderError) when the hashing library fails.
        """
        ...
