"""Global exception handlers.

Use cases return expected failures as Result values, so only framework
errors (unknown route, wrong method, malformed body) and bugs reach these
handlers. All of them answer with Problem Details.

Exports:
    register_exception_handlers: Install the handlers on the application
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    INTERNAL_DETAIL,
    ErrorDetail,
    problem_response,
)

# Status codes starlette raises on its own -> (title, slug)
_FRAMEWORK_STATUS: dict[int, tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("Bad Request", "bad-request"),
    status.HTTP_404_NOT_FOUND: ("Resource Not Found", "not-found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method Not Allowed", "method-not-allowed"),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "Unsupported Media Type",
        "unsupported-media-type",
    ),
}


def _trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render routing errors (404, 405) as Problem Details."""
    assert isinstance(exc, HTTPException)

    title, slug = _FRAMEWORK_STATUS.get(exc.status_code, ("Error", "error"))
    return problem_response(
        request,
        status_code=exc.status_code,
        title=title,
        slug=slug,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        trace_id=_trace_id(request),
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Render request body validation errors with one entry per field.

    The ``body`` prefix of pydantic locations is dropped, so a missing
    password inside credentials is reported as ``credentials.password``.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part != "body")
            or "body",
            code=error["type"],
            message=error["msg"],
        )
        for error in exc.errors()
    ]

    return problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        title="Validation Failed",
        slug="validation-failed",
        detail="Request validation failed. Check 'errors' for details.",
        trace_id=_trace_id(request),
        errors=field_errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an escaped exception and answer 500 without leaking it."""
    trace_id = _trace_id(request)
    get_logger().error(
        "Unhandled exception",
        error_type=type(exc).__name__,
        error=str(exc),
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    return problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        slug="internal-server-error",
        detail=INTERNAL_DETAIL,
        trace_id=trace_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
