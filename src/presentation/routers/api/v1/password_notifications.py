"""Password notifications resource router.

Endpoints:
    POST   /api/v1/password-notifications  - Issue a forgot-password token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import SendForgotPasswordNotification
from src.application.commands.handlers.send_forgot_password_notification_handler import (
    SendForgotPasswordNotificationHandler,
)
from src.core.container import (
    get_logger,
    get_send_forgot_password_notification_handler,
    get_timing_logger,
)
from src.core.result import Failure, Success
from src.domain.protocols import LoggerProtocol, TimingLoggerProtocol
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.controller_timing import controller_timing
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    PasswordNotificationCreateRequest,
    PasswordNotificationCreateResponse,
)

router = APIRouter(prefix="/password-notifications", tags=["Password Notifications"])


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=PasswordNotificationCreateResponse,
    responses={
        202: {
            "description": "Forgot-password token issued",
            "model": PasswordNotificationCreateResponse,
        },
        400: {"description": "Unknown or malformed email", "model": ProblemDetails},
        500: {"description": "Provider or repository failure", "model": ProblemDetails},
    },
    summary="Create password notification",
    description="Issue a short-lived forgot-password token for an account.",
)
async def create_password_notification(
    request: Request,
    data: PasswordNotificationCreateRequest,
    handler: SendForgotPasswordNotificationHandler = Depends(
        get_send_forgot_password_notification_handler
    ),
    timing_logger: TimingLoggerProtocol = Depends(get_timing_logger),
    logger: LoggerProtocol = Depends(get_logger),
) -> PasswordNotificationCreateResponse | JSONResponse:
    """Issue a forgot-password token.

    POST /api/v1/password-notifications → 202 Accepted

    Returns:
        PasswordNotificationCreateResponse on success (202 Accepted).
        JSONResponse with Problem Details on failure.
    """
    with controller_timing(
        "SendForgotPasswordNotificationController", data, timing_logger, logger
    ):
        result = await handler.execute(SendForgotPasswordNotification(email=data.email))

        match result:
            case Success():
                return PasswordNotificationCreateResponse()
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(
                    error, request, get_trace_id()
                )
