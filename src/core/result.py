"""Result types for railway-oriented programming.

Every fallible operation in the service returns a Result instead of raising.
Expected failures (bad input, unknown user, provider outage) travel as data
and the caller decides what to do with them.

Usage:
    def find_user(email: ValidatedEmail) -> Result[User, RepositoryError]:
        ...

    result = await repository.find_by_email(email)
    match result:
        case Success(value=user):
            print(user.id)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
