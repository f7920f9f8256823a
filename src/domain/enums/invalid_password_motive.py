"""Reasons a plaintext password fails validation."""

from enum import Enum


class InvalidPasswordMotive(str, Enum):
    """Password validation failure motives."""

    IS_BLANK = "is blank"
    IS_LESS_THAN_8_CHARACTERS = "is less than 8 characters"
    HAS_SPACE = "has space"
    IS_MORE_THAN_30_CHARACTERS = "is more than 30 characters"
    INVALID_CHARACTERS = "invalid characters"
