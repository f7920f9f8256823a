"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Logging (console, timing sink)
- Password hashing (bcrypt)
- Token generation (JWT, random codes, identifiers)
- Social identity providers (Facebook, Google)

Request-scoped database sessions are provided by get_db_session().
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.http_client_protocol import HttpClientProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.social_identity_protocol import (
        FacebookApiProtocol,
        GoogleApiProtocol,
    )
    from src.domain.protocols.timing_logger_protocol import TimingLoggerProtocol
    from src.domain.protocols.token_generation_protocol import (
        IdGenerationProtocol,
        RandomTokenProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Database (Application-Scoped)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Repositories commit their own writes; the session is rolled back on
    exception and always closed.

    Yields:
        Database session for request duration.

    Usage:
        from fastapi import Depends
        from sqlalchemy.ext.asyncio import AsyncSession

        @router.post("/users")
        async def create_user(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        log_level=settings.log_level,
    )


@lru_cache()
def get_timing_logger() -> "TimingLoggerProtocol":
    """Get timing sink singleton (app-scoped).

    Use cases and controllers report their elapsed time here.
    """
    from src.infrastructure.logging.timing_logger import TimingLoggerAdapter

    return TimingLoggerAdapter(logger=get_logger())


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (settings.bcrypt_rounds, default 10).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(
        logger=get_logger(),
        cost_factor=settings.bcrypt_rounds,
    )


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        logger=get_logger(),
        issuer=settings.jwt_issuer,
        expiration_minutes=settings.jwt_expiration_minutes,
        algorithm=settings.jwt_algorithm,
    )


@lru_cache()
def get_random_token_service() -> "RandomTokenProtocol":
    """Get random token generator singleton (app-scoped)."""
    from src.infrastructure.security import RandomTokenService

    return RandomTokenService()


@lru_cache()
def get_id_service() -> "IdGenerationProtocol":
    """Get identifier generator singleton (app-scoped)."""
    from src.infrastructure.security import IdService

    return IdService()


# ============================================================================
# Social Identity Providers (Application-Scoped)
# ============================================================================


@lru_cache()
def get_http_client() -> "HttpClientProtocol":
    """Get outbound HTTP client singleton (app-scoped).

    The adapter opens one httpx.AsyncClient per request, so sharing the
    wrapper is safe across concurrent requests.
    """
    from src.infrastructure.providers import HttpxClient

    return HttpxClient(timeout=settings.http_timeout_seconds)


@lru_cache()
def get_facebook_api() -> "FacebookApiProtocol":
    """Get Facebook Graph API adapter singleton (app-scoped)."""
    from src.infrastructure.providers import FacebookApiAdapter

    return FacebookApiAdapter(
        http_client=get_http_client(),
        logger=get_logger(),
        base_url=settings.facebook_api_base_url,
        client_id=settings.facebook_client_id,
        client_secret=settings.facebook_client_secret,
    )


@lru_cache()
def get_google_api() -> "GoogleApiProtocol":
    """Get Google userinfo adapter singleton (app-scoped)."""
    from src.infrastructure.providers import GoogleApiAdapter

    return GoogleApiAdapter(
        http_client=get_http_client(),
        logger=get_logger(),
        userinfo_url=settings.google_userinfo_url,
    )
