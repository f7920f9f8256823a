"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - ProviderName / ProviderMethod: Collaborator and operation named in ProviderError
    - RepositoryName / RepositoryMethod: Collaborator and operation named in RepositoryError
    - SignInErrorMotive: Why a sign-in was rejected
    - InvalidPasswordMotive: Why a password failed validation
"""

from src.domain.enums.invalid_password_motive import InvalidPasswordMotive
from src.domain.enums.provider_method import ProviderMethod
from src.domain.enums.provider_name import ProviderName
from src.domain.enums.repository_method import RepositoryMethod
from src.domain.enums.repository_name import RepositoryName
from src.domain.enums.sign_in_error_motive import SignInErrorMotive

__all__ = [
    "InvalidPasswordMotive",
    "ProviderMethod",
    "ProviderName",
    "RepositoryMethod",
    "RepositoryName",
    "SignInErrorMotive",
]
