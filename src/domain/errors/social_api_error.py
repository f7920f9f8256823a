"""Social identity API errors.

Returned when Facebook or Google answers, but not with a usable identity
(non-200 status, or a payload missing the id or email).
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.enums import StatusError
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadUserGoogleApiError(DomainError):
    """Google userinfo did not yield an identity.

    Attributes:
        details: Response context (status code, error payload) for logs.
    """

    details: dict[str, Any] | None = field(default=None, compare=False)
    status: StatusError = field(default=StatusError.INVALID, init=False)
    message: str = field(default="Error in load user google api.", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadUserFacebookApiError(DomainError):
    """Facebook Graph API did not yield an identity.

    Attributes:
        details: Response context (status code, error payload) for logs.
    """

    details: dict[str, Any] | None = field(default=None, compare=False)
    status: StatusError = field(default=StatusError.INVALID, init=False)
    message: str = field(default="Error in load user facebook api.", init=False)
