"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/users                   - User creation (sign up)
    /api/v1/sessions                - Session creation (sign in)
    /api/v1/password-notifications  - Forgot-password tokens
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.password_notifications import (
    router as password_notifications_router,
)
from src.presentation.routers.api.v1.sessions import router as sessions_router
from src.presentation.routers.api.v1.users import router as users_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

# Include all resource routers
v1_router.include_router(users_router)
v1_router.include_router(sessions_router)
v1_router.include_router(password_notifications_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "users_router",
    "sessions_router",
    "password_notifications_router",
]
