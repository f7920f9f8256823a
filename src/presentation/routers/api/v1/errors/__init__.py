"""Problem Details rendering for the v1 API.

Exports:
    ErrorDetail: Field-level validation error
    ProblemDetails: Error response body
    problem_response: Render a problem as a JSONResponse
    ErrorResponseBuilder: DomainError -> Problem Details response
    register_exception_handlers: Install global exception handlers
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
    problem_response,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "problem_response",
    "register_exception_handlers",
]
