"""Console logging adapter.

Structured logs go to stdout through structlog: colored key/value lines in
development, one JSON object per line elsewhere. Values bound with
``structlog.contextvars`` (the request trace_id) are merged into every record.

The adapter satisfies LoggerProtocol structurally; it does not inherit it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _exception_fields(error: BaseException | None, context: dict[str, Any]) -> dict:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON lines when True, console renderer when False.
        log_level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, log_level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log at error level; ``error`` adds error_type and error_message."""
        self._logger.error(message, **_exception_fields(error, context))

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_exception_fields(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose records all carry ``context``."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
