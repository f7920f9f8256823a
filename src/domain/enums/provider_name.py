"""Names of the external-capability collaborators.

Used by ProviderError to say which collaborator failed.
"""

from enum import Enum


class ProviderName(str, Enum):
    """External capability collaborators."""

    PASSWORD = "password"
    EMAIL = "email"
    CRYPTO = "crypto"
    FACEBOOK_API = "facebook api"
    TOKEN = "token"
    GOOGLE_API = "google api"
    HTTP_CLIENT = "http client"
