"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.social_identity import SocialIdentity
from src.domain.entities.token_forgot_password import TokenForgotPassword
from src.domain.entities.user import SocialAccount, User

__all__ = [
    "SocialAccount",
    "SocialIdentity",
    "TokenForgotPassword",
    "User",
]
