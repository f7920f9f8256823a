"""Repository error type for persistence contracts.

Returned by repository adapters when the storage engine fails. The status is
repository_error except for uniqueness violations caught at insert time,
which are reported as conflict.
"""

from dataclasses import dataclass, field

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.domain.enums import RepositoryMethod, RepositoryName


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryError(DomainError):
    """Persistence failure.

    Attributes:
        name: Repository that failed.
        method: Operation that failed.
        external_name: Underlying library, if any.
        cause: Original exception, kept for diagnostics only.
        status: REPOSITORY_ERROR, or CONFLICT for uniqueness violations.
    """

    name: RepositoryName
    method: RepositoryMethod
    external_name: str | None = None
    cause: BaseException | None = field(default=None, compare=False, repr=False)
    status: StatusError = StatusError.REPOSITORY_ERROR
    message: str = field(init=False)

    def __post_init__(self) -> None:
        message = f"Error in {self.name.value} repository in {self.method.value} method."
        if self.external_name:
            message += f" Error in external lib name: {self.external_name}."
        object.__setattr__(self, "message", message)
