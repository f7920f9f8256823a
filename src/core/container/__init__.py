"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_sign_in_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, security, social providers)
- repositories: Repository factories
- auth_handlers: Authentication handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_facebook_api,
    get_google_api,
    get_http_client,
    get_id_service,
    get_logger,
    get_password_service,
    get_random_token_service,
    get_timing_logger,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_token_forgot_password_repository,
    get_user_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_credentials_sign_in_handler,
    get_facebook_sign_in_handler,
    get_google_sign_in_handler,
    get_send_forgot_password_notification_handler,
    get_sign_in_handler,
    get_sign_up_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_timing_logger",
    "get_password_service",
    "get_token_service",
    "get_random_token_service",
    "get_id_service",
    "get_http_client",
    "get_facebook_api",
    "get_google_api",
    # Repositories
    "get_user_repository",
    "get_token_forgot_password_repository",
    # Auth handlers
    "get_sign_up_handler",
    "get_credentials_sign_in_handler",
    "get_facebook_sign_in_handler",
    "get_google_sign_in_handler",
    "get_sign_in_handler",
    "get_send_forgot_password_notification_handler",
]
