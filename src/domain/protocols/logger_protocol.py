"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST emit
structured records (message + key-value context) and MUST NOT log secrets.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events (sign-ups, sign-ins, timings)
    - WARNING: Degraded behavior that did not fail the operation
    - ERROR: A collaborator failed and the failure was wrapped into a Result
    - CRITICAL: Service-wide failure

Security:
    - NEVER log passwords, password hashes, access tokens or reset tokens

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("User signed up", user_id=str(user_id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("Request started")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for service-wide failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is left unchanged.

        Args:
            **context: Context to include in every later log call.

        Returns:
            New logger instance with bound context.
        """
        ...
