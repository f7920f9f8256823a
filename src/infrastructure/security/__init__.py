"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- JWT access token signing/verification (PyJWT)
- Random short token generation (secrets)
- Identifier generation (uuid7)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.id_service import IdService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.random_token_service import RandomTokenService

__all__ = [
    "BcryptPasswordService",
    "IdService",
    "JWTService",
    "RandomTokenService",
]
