"""Base error class for railway-oriented programming.

DomainError is the base class for every error the service produces, from value
object validation up to infrastructure adapters. Errors are returned inside
Failure, never raised.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Carries a StatusError used by the transport layer for status mapping

Usage:
    from dataclasses import dataclass, field

    from src.core.enums import StatusError
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        status: StatusError = field(default=StatusError.INVALID, init=False)
"""

from dataclasses import dataclass

from src.core.enums import StatusError


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        status: Status classification used for transport mapping.
        message: Human-readable message, safe to log.
    """

    status: StatusError
    message: str

    def __str__(self) -> str:
        """String representation of error."""
        return self.message
