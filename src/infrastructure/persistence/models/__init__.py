"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Models Organization:
    - user.py: User model
    - token_forgot_password.py: Forgot-password token model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.token_forgot_password import (
    TokenForgotPasswordModel,
)
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "TokenForgotPasswordModel",
    "UserModel",
]
