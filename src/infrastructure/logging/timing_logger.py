"""Timing logger adapter.

Implements TimingLoggerProtocol on top of a LoggerProtocol. Use case and
controller durations are emitted as info records with a `timing` field so
they can be filtered apart from other logs.

Callers treat reports as fire-and-forget and guard against a failing backend.
"""

from src.domain.protocols import LoggerProtocol


class TimingLoggerAdapter:
    """Elapsed-time report sink backed by structured logging.

    Args:
        logger: Structured logger that receives the reports.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def send_log_time_use_case(self, message: str) -> None:
        self._logger.info(message, timing="use_case")

    def send_log_time_controller(self, message: str) -> None:
        self._logger.info(message, timing="controller")
