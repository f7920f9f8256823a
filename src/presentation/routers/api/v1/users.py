"""Users resource router.

Endpoints:
    POST   /api/v1/users            - Create user (sign up, then sign in)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import SignIn, SignUp
from src.application.commands.handlers.sign_in_handler import SignInHandler
from src.application.commands.handlers.sign_up_handler import SignUpHandler
from src.core.container import (
    get_logger,
    get_sign_in_handler,
    get_sign_up_handler,
    get_timing_logger,
)
from src.core.result import Failure, Success
from src.domain.protocols import LoggerProtocol, TimingLoggerProtocol
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.controller_timing import controller_timing
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import AccessTokenResponse, UserCreateRequest

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AccessTokenResponse,
    responses={
        201: {"description": "User created", "model": AccessTokenResponse},
        400: {"description": "Invalid email or password", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
        500: {"description": "Provider or repository failure", "model": ProblemDetails},
    },
    summary="Create user",
    description="Register with email and password and receive an access token.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    sign_up_handler: SignUpHandler = Depends(get_sign_up_handler),
    sign_in_handler: SignInHandler = Depends(get_sign_in_handler),
    timing_logger: TimingLoggerProtocol = Depends(get_timing_logger),
    logger: LoggerProtocol = Depends(get_logger),
) -> AccessTokenResponse | JSONResponse:
    """Create a new user (sign up).

    POST /api/v1/users → 201 Created

    Runs SignUp, then SignIn with the new user's id so the caller is signed
    in straight away.

    Args:
        request: FastAPI request object.
        data: Sign-up request (email, password).
        sign_up_handler: SignUp handler (injected).
        sign_in_handler: SignIn dispatcher (injected).
        timing_logger: Controller timing sink (injected).
        logger: Logger (injected).

    Returns:
        AccessTokenResponse on success (201 Created).
        JSONResponse with Problem Details on failure.
    """
    with controller_timing("SignUpController", data, timing_logger, logger):
        sign_up_result = await sign_up_handler.execute(
            SignUp(email=data.email, password=data.password)
        )
        if isinstance(sign_up_result, Failure):
            return ErrorResponseBuilder.from_domain_error(
                sign_up_result.error, request, get_trace_id()
            )

        sign_in_result = await sign_in_handler.execute(
            SignIn(user=sign_up_result.value)
        )

        match sign_in_result:
            case Success(value=token):
                return AccessTokenResponse(access_token=token.access_token)
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(
                    error, request, get_trace_id()
                )
