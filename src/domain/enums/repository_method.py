"""Operations exposed by persistence collaborators."""

from enum import Enum


class RepositoryMethod(str, Enum):
    """Repository operations named in RepositoryError messages."""

    FIND_BY_EMAIL = "find by email"
    SAVE = "save"
    SAVE_WITH_FACEBOOK_ACCOUNT = "save with facebook account"
    SAVE_WITH_GOOGLE_ACCOUNT = "save with google account"
    UPDATE = "update"
