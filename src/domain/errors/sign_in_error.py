"""Sign-in rejection error.

The motive decides the status: an unknown email or unresolvable user is
not_found, a wrong password is invalid.
"""

from dataclasses import dataclass, field

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.domain.enums import SignInErrorMotive

_NOT_FOUND_MOTIVES = frozenset(
    {SignInErrorMotive.EMAIL_NOT_FOUND, SignInErrorMotive.USER_NOT_FOUND}
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SignInError(DomainError):
    """Sign-in rejected.

    Attributes:
        motive: Why the attempt was rejected.
    """

    motive: SignInErrorMotive
    status: StatusError = field(init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        status = (
            StatusError.NOT_FOUND
            if self.motive in _NOT_FOUND_MOTIVES
            else StatusError.INVALID
        )
        object.__setattr__(self, "status", status)
        object.__setattr__(
            self, "message", f"Error sign in because {self.motive.value}."
        )
