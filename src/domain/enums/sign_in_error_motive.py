"""Reasons a sign-in attempt can be rejected."""

from enum import Enum


class SignInErrorMotive(str, Enum):
    """Sign-in rejection motives.

    EMAIL_NOT_FOUND and USER_NOT_FOUND classify as not_found,
    PASSWORD_NOT_MATCH classifies as invalid.
    """

    EMAIL_NOT_FOUND = "email not found"
    PASSWORD_NOT_MATCH = "password not match"
    USER_NOT_FOUND = "user not found"
