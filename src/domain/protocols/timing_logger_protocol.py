"""Timing sink protocol.

Receives elapsed-time reports for use cases and HTTP controllers. Reports are
fire-and-forget: callers guard every send, so a failing sink never changes the
outcome of the operation being timed.
"""

from typing import Protocol


class TimingLoggerProtocol(Protocol):
    """Elapsed-time report sink.

    Message format:
        "{Name}.execute({params}) took +{ms} ms to execute!"
    """

    def send_log_time_use_case(self, message: str) -> None:
        """Report the duration of one use case execution."""
        ...

    def send_log_time_controller(self, message: str) -> None:
        """Report the duration of one controller invocation."""
        ...
