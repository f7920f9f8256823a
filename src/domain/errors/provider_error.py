"""Provider error type for domain protocol contracts.

ProviderError is the failure every external-capability adapter returns
(password hashing, token signing, random/id generation, social identity,
outbound HTTP). The message names the collaborator and the operation, plus
the underlying library when one was involved.

Architecture:
- Domain layer error (part of protocol contracts)
- Inherits from DomainError (core layer)
- Built by infrastructure adapters at the point of failure

Usage:
    from src.domain.enums import ProviderMethod, ProviderName
    from src.domain.errors import ProviderError

    return Failure(
        error=ProviderError(
            name=ProviderName.PASSWORD,
            method=ProviderMethod.ENCRYPT,
            external_name="bcrypt",
            cause=exc,
        )
    )
"""

from dataclasses import dataclass, field

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.domain.enums import ProviderMethod, ProviderName


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(DomainError):
    """External collaborator failure.

    Attributes:
        name: Collaborator that failed.
        method: Operation that failed.
        external_name: Underlying library or service, if any.
        cause: Original exception, kept for diagnostics only.
    """

    name: ProviderName
    method: ProviderMethod
    external_name: str | None = None
    cause: BaseException | None = field(default=None, compare=False, repr=False)
    status: StatusError = field(default=StatusError.PROVIDER_ERROR, init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        message = f"Error in {self.name.value} provider in {self.method.value} method."
        if self.external_name:
            message += f" Error in external provider name: {self.external_name}."
        object.__setattr__(self, "message", message)
