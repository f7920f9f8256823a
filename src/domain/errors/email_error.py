"""Email-related domain errors."""

from dataclasses import dataclass, field

from src.core.enums import StatusError
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidEmailError(DomainError):
    """Email failed format validation, or names no known user."""

    email: str
    status: StatusError = field(default=StatusError.INVALID, init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"This email is invalid: {self.email}.")


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailAlreadyExistsError(DomainError):
    """A user with this email is already registered."""

    email: str
    status: StatusError = field(default=StatusError.CONFLICT, init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", f"This email already exists: {self.email}."
        )
