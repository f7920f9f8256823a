"""RFC 9457 Problem Details for HTTP APIs.

Every error leaving the service (domain failures, validation errors, unknown
routes, unhandled exceptions) is rendered through ``problem_response``.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: Error response body
    problem_response: Render a ProblemDetails as a JSONResponse
    INTERNAL_DETAIL: Public detail for every 5xx response
"""

from collections.abc import Mapping

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.core.config import settings

INTERNAL_DETAIL = (
    "An unexpected error occurred. Please contact support with the trace ID."
)


class ErrorDetail(BaseModel):
    """One invalid request field (e.g. ``credentials.password``)."""

    field: str = Field(..., description="Dotted path of the invalid field")
    code: str = Field(..., description="Pydantic error type")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Error body returned by every endpoint.

    Attributes:
        type: ``{api_base_url}/errors/{slug}``
        title: Short summary of the problem type
        status: HTTP status code
        detail: Explanation for this occurrence
        instance: Request path
        errors: Field errors (request validation only)
        trace_id: X-Trace-Id of the request

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="This email already exists: user@example.com.",
        ...     instance="/api/v1/users",
        ... )
    """

    type: str = Field(
        ...,
        description="Problem type URI",
        examples=["http://localhost:8000/errors/conflict"],
    )
    title: str = Field(..., examples=["Resource Conflict"])
    status: int = Field(..., examples=[409])
    detail: str = Field(
        ...,
        examples=["This email already exists: user@example.com."],
    )
    instance: str = Field(..., examples=["/api/v1/users"])
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Field errors for request validation failures",
    )
    trace_id: str | None = Field(None, description="Request trace ID")


def problem_response(
    request: Request,
    *,
    status_code: int,
    title: str,
    slug: str,
    detail: str,
    trace_id: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON response for a problem.

    Unset optional members are omitted from the body.
    """
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=trace_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )
