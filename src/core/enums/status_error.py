"""Error status classification.

Every error in the service carries one of these statuses. The status is
independent of the error's identity and is what the transport layer maps to
a response code.

Statuses:
- NOT_FOUND: Referenced entity is absent
- INVALID: Malformed input or business rule violation
- CONFLICT: Uniqueness violation
- UNAUTHORIZED: Reserved, no operation produces it yet
- PROVIDER_ERROR: External service or library failure
- REPOSITORY_ERROR: Persistence failure
"""

from enum import Enum


class StatusError(str, Enum):
    """Closed set of error status classifications."""

    NOT_FOUND = "not_found"
    INVALID = "invalid"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    PROVIDER_ERROR = "provider_error"
    REPOSITORY_ERROR = "repository_error"
