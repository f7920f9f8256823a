"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    # Import service protocols
    from src.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol

    # Import repository protocols
    from src.domain.protocols import UserRepository, TokenForgotPasswordRepository
"""

# Service protocols
from src.domain.protocols.http_client_protocol import HttpClientProtocol, HttpResponse
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

# Repository protocols
from src.domain.protocols.token_forgot_password_repository import (
    TokenForgotPasswordRepository,
)
from src.domain.protocols.user_repository import (
    NewSocialUser,
    NewUser,
    UserRepository,
    UserUpdate,
)

__all__ = [
    # Service protocols
    "FacebookApiProtocol",
    "GoogleApiProtocol",
    "HttpClientProtocol",
    "HttpResponse",
    "IdGenerationProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RandomTokenProtocol",
    "TimingLoggerProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "NewSocialUser",
    "NewUser",
    "TokenForgotPasswordRepository",
    "UserRepository",
    "UserUpdate",
]
