"""Unversioned system endpoints (root banner and liveness).

Neither endpoint touches the database or an external provider.
"""

from fastapi import APIRouter

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service name, status and version."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "healthy"}
