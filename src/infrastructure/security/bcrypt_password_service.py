"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Cost factor from settings (10 by default, 2^10 iterations)
    - Random salt per hash
    - Constant-time comparison

Performance:
    - bcrypt is CPU bound, so calls run in a worker thread to keep the event
      loop free
"""

import asyncio
import re

import bcrypt

from src.core.result import Failure, Result, Success
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import ProviderError
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import PasswordHash, ValidatedPassword

EXTERNAL_NAME = "bcrypt"

# Modular crypt format: $2b$<cost>$<22 char salt><31 char digest>
BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        # Via dependency injection
        from src.core.container import get_password_service

        password_service = get_password_service()

        result = await password_service.encrypt(password)
        result = await password_service.compare(password, user.password)
    """

    def __init__(self, logger: LoggerProtocol, cost_factor: int = 10) -> None:
        """Initialize bcrypt password service.

        Args:
            logger: Structured logger for wrapped failures.
            cost_factor: Bcrypt cost factor (default: 10).
                Cost factor is logarithmic: each +1 doubles computation time.

        Raises:
            ValueError: If cost factor is outside bcrypt's 4-31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._logger = logger
        self._cost_factor = cost_factor

    async def encrypt(
        self, password: ValidatedPassword
    ) -> Result[PasswordHash, ProviderError]:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext that passed Password.validate.

        Returns:
            Success(PasswordHash) in bcrypt format ($2b$10$...), 60 characters.
            Failure(ProviderError) if bcrypt fails.
        """
        try:
            password_hash = await asyncio.to_thread(self._hash, password.value)
        except (ValueError, TypeError) as e:
            self._logger.error(
                "Password hashing failed", error=e, provider=EXTERNAL_NAME
            )
            return Failure(
                error=ProviderError(
                    name=ProviderName.PASSWORD,
                    method=ProviderMethod.ENCRYPT,
                    external_name=EXTERNAL_NAME,
                    cause=e,
                )
            )
        return Success(value=PasswordHash(password_hash))

    async def compare(
        self, password: ValidatedPassword, password_hash: PasswordHash
    ) -> Result[bool, ProviderError]:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext that passed Password.validate.
            password_hash: Hash from the users repository.

        Returns:
            Success(True/False). A stored value that is not a bcrypt hash
            (the placeholder of a social-only user) never matches.
            Failure(ProviderError) if bcrypt fails.
        """
        if BCRYPT_HASH_PATTERN.match(password_hash.value) is None:
            return Success(value=False)

        try:
            is_equal = await asyncio.to_thread(
                bcrypt.checkpw,
                password.value.encode("utf-8"),
                password_hash.value.encode("utf-8"),
            )
        except (ValueError, TypeError) as e:
            self._logger.error(
                "Password comparison failed", error=e, provider=EXTERNAL_NAME
            )
            return Failure(
                error=ProviderError(
                    name=ProviderName.PASSWORD,
                    method=ProviderMethod.COMPARE,
                    external_name=EXTERNAL_NAME,
                    cause=e,
                )
            )
        return Success(value=is_equal)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        # bcrypt returns bytes
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
