"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import ProviderError, RepositoryError, SignInError
"""

from src.domain.errors.email_error import EmailAlreadyExistsError, InvalidEmailError
from src.domain.errors.password_error import InvalidPasswordError
from src.domain.errors.provider_error import ProviderError
from src.domain.errors.repository_error import RepositoryError
from src.domain.errors.sign_in_error import SignInError
from src.domain.errors.social_api_error import (
    LoadUserFacebookApiError,
    LoadUserGoogleApiError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidPasswordError",
    # Collaborator errors
    "ProviderError",
    "RepositoryError",
    "SignInError",
    # Social identity errors
    "LoadUserFacebookApiError",
    "LoadUserGoogleApiError",
]
