"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Sign up with email and password
- Sign in with credentials, Facebook or Google (and the dispatcher)
- Forgot-password notification

Handlers share the request's repositories, so one request uses one session.
"""

from datetime import timedelta

from fastapi import Depends

from src.application.commands.handlers.credentials_sign_in_handler import (
    CredentialsSignInHandler,
)
from src.application.commands.handlers.facebook_sign_in_handler import (
    FacebookSignInHandler,
)
from src.application.commands.handlers.google_sign_in_handler import (
    GoogleSignInHandler,
)
from src.application.commands.handlers.send_forgot_password_notification_handler import (
    SendForgotPasswordNotificationHandler,
)
from src.application.commands.handlers.sign_in_handler import SignInHandler
from src.application.commands.handlers.sign_up_handler import SignUpHandler
from src.core.config import settings
from src.core.container.infrastructure import (
    get_facebook_api,
    get_google_api,
    get_logger,
    get_password_service,
    get_random_token_service,
    get_timing_logger,
    get_token_service,
)
from src.core.container.repositories import (
    get_token_forgot_password_repository,
    get_user_repository,
)
from src.infrastructure.persistence.repositories import (
    TokenForgotPasswordRepository,
    UserRepository,
)


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_sign_up_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> SignUpHandler:
    """Get SignUp command handler (request-scoped).

    Dependencies:
    - UserRepository (request-scoped, uses session)
    - BcryptPasswordService (app-scoped singleton)

    Usage:
        @router.post("/users")
        async def create_user(
            handler: SignUpHandler = Depends(get_sign_up_handler)
        ):
            result = await handler.execute(command)
    """
    return SignUpHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
    )


async def get_credentials_sign_in_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CredentialsSignInHandler:
    """Get CredentialsSignIn command handler (request-scoped)."""
    return CredentialsSignInHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
    )


async def get_facebook_sign_in_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> FacebookSignInHandler:
    """Get FacebookSignIn command handler (request-scoped)."""
    return FacebookSignInHandler(
        user_repo=user_repo,
        facebook_api=get_facebook_api(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
    )


async def get_google_sign_in_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GoogleSignInHandler:
    """Get GoogleSignIn command handler (request-scoped)."""
    return GoogleSignInHandler(
        user_repo=user_repo,
        google_api=get_google_api(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
    )


async def get_sign_in_handler(
    credentials_sign_in: CredentialsSignInHandler = Depends(
        get_credentials_sign_in_handler
    ),
    facebook_sign_in: FacebookSignInHandler = Depends(get_facebook_sign_in_handler),
    google_sign_in: GoogleSignInHandler = Depends(get_google_sign_in_handler),
) -> SignInHandler:
    """Get SignIn dispatcher handler (request-scoped).

    Composes the three sign-in handlers and the JWT service. FastAPI caches
    get_user_repository per request, so all three share one repository.
    """
    return SignInHandler(
        credentials_sign_in=credentials_sign_in,
        facebook_sign_in=facebook_sign_in,
        google_sign_in=google_sign_in,
        token_service=get_token_service(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
    )


async def get_send_forgot_password_notification_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_repo: TokenForgotPasswordRepository = Depends(
        get_token_forgot_password_repository
    ),
) -> SendForgotPasswordNotificationHandler:
    """Get SendForgotPasswordNotification command handler (request-scoped).

    Token length and validity window come from settings.
    """
    return SendForgotPasswordNotificationHandler(
        user_repo=user_repo,
        token_repo=token_repo,
        token_generator=get_random_token_service(),
        timing_logger=get_timing_logger(),
        logger=get_logger(),
        token_length=settings.forgot_password_token_length,
        token_ttl=timedelta(hours=settings.forgot_password_token_ttl_hours),
    )
