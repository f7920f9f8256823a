"""Sessions resource router.

Endpoints:
    POST   /api/v1/sessions         - Create session (sign in)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import CredentialsSignIn, SignIn
from src.application.commands.handlers.sign_in_handler import SignInHandler
from src.core.container import get_logger, get_sign_in_handler, get_timing_logger
from src.core.result import Failure, Success
from src.domain.protocols import LoggerProtocol, TimingLoggerProtocol
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.controller_timing import controller_timing
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import AccessTokenResponse, SessionCreateRequest

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AccessTokenResponse,
    responses={
        200: {"description": "Signed in", "model": AccessTokenResponse},
        400: {"description": "Invalid credentials", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
        500: {"description": "Provider or repository failure", "model": ProblemDetails},
    },
    summary="Create session",
    description=(
        "Sign in with credentials, a Facebook access token or a Google access "
        "token and receive a signed access token."
    ),
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: SignInHandler = Depends(get_sign_in_handler),
    timing_logger: TimingLoggerProtocol = Depends(get_timing_logger),
    logger: LoggerProtocol = Depends(get_logger),
) -> AccessTokenResponse | JSONResponse:
    """Create a new session (sign in).

    POST /api/v1/sessions → 200 OK

    Args:
        request: FastAPI request object.
        data: Sign-in request (credentials or a social access token).
        handler: SignIn dispatcher (injected).
        timing_logger: Controller timing sink (injected).
        logger: Logger (injected).

    Returns:
        AccessTokenResponse on success.
        JSONResponse with Problem Details on failure.
    """
    with controller_timing("SignInController", data, timing_logger, logger):
        credentials = (
            CredentialsSignIn(
                email=data.credentials.email,
                password=data.credentials.password,
            )
            if data.credentials is not None
            else None
        )
        result = await handler.execute(
            SignIn(
                credentials=credentials,
                facebook_access_token=data.facebook_access_token,
                google_access_token=data.google_access_token,
            )
        )

        match result:
            case Success(value=token):
                return AccessTokenResponse(access_token=token.access_token)
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(
                    error, request, get_trace_id()
                )
