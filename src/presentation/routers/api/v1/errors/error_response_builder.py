"""Error response builder for RFC 9457 Problem Details.

This module builds Problem Details responses from domain errors returned by
the use cases.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.presentation.routers.api.v1.errors.problem_details import (
    INTERNAL_DETAIL,
    problem_response,
)

# StatusError -> (HTTP status, title, slug)
_STATUS_INFO: dict[StatusError, tuple[int, str, str]] = {
    StatusError.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict", "conflict"),
    StatusError.INVALID: (status.HTTP_400_BAD_REQUEST, "Invalid Request", "invalid"),
    StatusError.NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Resource Not Found",
        "not-found",
    ),
    StatusError.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
        "unauthorized",
    ),
    StatusError.PROVIDER_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Provider Error",
        "provider-error",
    ),
    StatusError.REPOSITORY_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Repository Error",
        "repository-error",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Client errors (4xx) carry the domain error message as detail. Server
    errors (5xx) carry a generic detail so adapter internals never leak.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=InvalidEmailError(email="nope"),
        ...     request=request,
        ...     trace_id="0190f6c2-2f0c-7c1e-8a55-5d4c1a2b3c4d",
        ... )
        >>> response.status_code
        400
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Args:
            error: Error returned by a use case.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title, slug = _STATUS_INFO.get(
            error.status,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "error"),
        )
        return problem_response(
            request,
            status_code=status_code,
            title=title,
            slug=slug,
            detail=error.message if status_code < 500 else INTERNAL_DETAIL,
            trace_id=trace_id,
        )

    @staticmethod
    def get_status_code(status_error: StatusError) -> int:
        """Map an error status classification to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(StatusError.CONFLICT)
            409
        """
        info = _STATUS_INFO.get(status_error)
        return info[0] if info else status.HTTP_500_INTERNAL_SERVER_ERROR
