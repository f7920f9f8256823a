"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Email limits: RFC 5321 length limits
- Password limits: Accepted plaintext length window
- Timeouts: Default timeouts for external service calls
- Forgot password: Default token shape and validity window

Example:
    >>> from src.core.constants import EMAIL_MAX_LENGTH
    >>> len(address) <= EMAIL_MAX_LENGTH
"""

# =============================================================================
# Email Limits
# =============================================================================

EMAIL_MAX_LENGTH: int = 320
"""Maximum length of a full email address."""

EMAIL_LOCAL_PART_MAX_LENGTH: int = 64
"""Maximum length of the part before '@'."""

EMAIL_DOMAIN_MAX_LENGTH: int = 255
"""Maximum length of the part after '@'."""

EMAIL_DOMAIN_LABEL_MAX_LENGTH: int = 63
"""Maximum length of each dot-separated domain label."""


# =============================================================================
# Password Limits
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
"""Minimum plaintext password length after trimming."""

PASSWORD_MAX_LENGTH: int = 30
"""Maximum plaintext password length after trimming."""


# =============================================================================
# Timeouts
# =============================================================================

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for external identity provider calls in seconds."""


# =============================================================================
# Forgot Password
# =============================================================================

FORGOT_PASSWORD_TOKEN_LENGTH_DEFAULT: int = 6
"""Number of characters in a forgot-password token."""

FORGOT_PASSWORD_TOKEN_TTL_HOURS_DEFAULT: int = 2
"""Validity window of a forgot-password token in hours."""

FORGOT_PASSWORD_TOKEN_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
"""Characters a forgot-password token is drawn from."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Truncation limit for provider response bodies kept in logs and error details."""
