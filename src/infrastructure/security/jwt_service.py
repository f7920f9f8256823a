"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Claims:
    - sub: user id
    - iss: configured issuer
    - iat / exp: issued at / expires at
    - jti: unique token id (uuid7)

Security:
    - HMAC family (HS256 by default)
    - 256-bit secret key minimum
    - Signature, expiration and issuer checked on verify
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import PyJWTError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums import ProviderMethod, ProviderName
from src.domain.errors import ProviderError
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import Id

EXTERNAL_NAME = "pyjwt"


class JWTService:
    """JWT access token generation and verification service.

    Usage:
        # Via dependency injection
        from src.core.container import get_token_service

        token_service = get_token_service()

        result = await token_service.generate_jwt(user_id)
        result = await token_service.verify_jwt(token)
    """

    def __init__(
        self,
        secret_key: str,
        logger: LoggerProtocol,
        issuer: str,
        expiration_minutes: int = 60 * 24,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            logger: Structured logger for wrapped failures.
            issuer: Value of the 'iss' claim.
            expiration_minutes: Token lifetime in minutes.
            algorithm: HMAC algorithm (HS256, HS384, HS512).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).

        Note:
            Secret key should come from settings, NEVER hardcoded.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._logger = logger
        self._issuer = issuer
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    async def generate_jwt(self, user_id: Id) -> Result[str, ProviderError]:
        """Generate a signed access token for a user.

        Args:
            user_id: User's unique identifier.

        Returns:
            Success(token) in header.payload.signature format, or
            Failure(ProviderError) if signing fails.
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": user_id.value,  # Subject (user ID)
            "iss": self._issuer,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }

        try:
            token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (PyJWTError, NotImplementedError, TypeError) as e:
            self._logger.error("JWT signing failed", error=e, provider=EXTERNAL_NAME)
            return Failure(
                error=ProviderError(
                    name=ProviderName.TOKEN,
                    method=ProviderMethod.GENERATE_JWT,
                    external_name=EXTERNAL_NAME,
                    cause=e,
                )
            )
        return Success(value=token)

    async def verify_jwt(self, token: str) -> Result[Id, ProviderError]:
        """Verify a token and extract the user id.

        Args:
            token: JWT access token string.

        Returns:
            Success(Id) from the 'sub' claim, or Failure(ProviderError) for
            invalid, expired, tampered or foreign-issuer tokens.
        """
        try:
            # PyJWT validates signature, exp and iss
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["sub", "exp", "iss"]},
            )
        except PyJWTError as e:
            self._logger.warning(
                "JWT verification failed",
                error_type=type(e).__name__,
                provider=EXTERNAL_NAME,
            )
            return Failure(
                error=ProviderError(
                    name=ProviderName.TOKEN,
                    method=ProviderMethod.VERIFY_JWT,
                    external_name=EXTERNAL_NAME,
                    cause=e,
                )
            )
        return Success(value=Id(payload["sub"]))
