"""Base class for timed use case handlers.

Every use case runs through execute(), which measures the call and reports
it to the timing sink:

    "SignUpHandler.execute(SignUp(email='a@b.com')) took +12 ms to execute!"

Subclasses implement handle(). The report never changes the result, and a
failing sink is logged and ignored.
"""

import time
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.core.result import Result
from src.domain.protocols import LoggerProtocol, TimingLoggerProtocol

C = TypeVar("C")  # Command type
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class UseCaseHandler(ABC, Generic[C, T, E]):
    """Timed use case.

    Stateless apart from constructor-injected collaborators, so one instance
    can serve concurrent requests.
    """

    def __init__(
        self, timing_logger: TimingLoggerProtocol, logger: LoggerProtocol
    ) -> None:
        self._timing_logger = timing_logger
        self._logger = logger

    async def execute(self, cmd: C) -> Result[T, E]:
        """Run the use case and report how long it took.

        Args:
            cmd: Use case command.

        Returns:
            The Result returned by handle(), unchanged.
        """
        started = time.perf_counter()
        result = await self.handle(cmd)
        elapsed_ms = round((time.perf_counter() - started) * 1000)

        message = (
            f"{type(self).__name__}.execute({cmd!r}) "
            f"took +{elapsed_ms} ms to execute!"
        )
        try:
            self._timing_logger.send_log_time_use_case(message)
        except Exception as e:
            self._logger.warning(
                "Use case timing report failed",
                use_case=type(self).__name__,
                error_type=type(e).__name__,
            )

        return result

    @abstractmethod
    async def handle(self, cmd: C) -> Result[T, E]:
        """Run the use case without timing."""
