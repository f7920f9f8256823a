"""Names of the persistence collaborators, one per entity family."""

from enum import Enum


class RepositoryName(str, Enum):
    """Persistence collaborators."""

    USERS = "users"
    TOKENS_FORGOT_PASSWORD = "tokens forgot password"
