"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.token_forgot_password_repository import (
    TokenForgotPasswordRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "TokenForgotPasswordRepository",
    "UserRepository",
]
