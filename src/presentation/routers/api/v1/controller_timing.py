"""Controller timing.

Endpoints wrap their work in controller_timing() so each request reports its
elapsed time to the timing sink:

    "SignInController.handle(SessionCreateRequest(credentials=...)) took +41 ms to execute!"

The report is sent whether the body returns or raises. A failing sink is
logged and ignored.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from src.domain.protocols import LoggerProtocol, TimingLoggerProtocol


@contextmanager
def controller_timing(
    controller_name: str,
    params: object,
    timing_logger: TimingLoggerProtocol,
    logger: LoggerProtocol,
) -> Iterator[None]:
    """Time the enclosed block and report it as a controller execution.

    Args:
        controller_name: Name shown in the report (e.g. "SignInController").
        params: Request payload; its repr is embedded in the message, so
            secrets must be excluded from it.
        timing_logger: Timing sink.
        logger: Logger used when the sink fails.
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - started) * 1000)
        message = (
            f"{controller_name}.handle({params!r}) took +{elapsed_ms} ms to execute!"
        )
        try:
            timing_logger.send_log_time_controller(message)
        except Exception as e:
            logger.warning(
                "Controller timing report failed",
                controller=controller_name,
                error_type=type(e).__name__,
            )
