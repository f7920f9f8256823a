"""Password validation error."""

from dataclasses import dataclass, field

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.domain.enums import InvalidPasswordMotive


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidPasswordError(DomainError):
    """Plaintext password rejected by validation.

    Attributes:
        motive: Which rule the password broke.
    """

    motive: InvalidPasswordMotive
    status: StatusError = field(default=StatusError.INVALID, init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", f"Invalid password because {self.motive.value}."
        )
