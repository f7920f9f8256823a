"""Unit tests for UseCaseHandler timing.

Tests cover:
- execute() returns handle()'s result unchanged
- Timing report format sent to the use case sink
- A failing sink is logged and does not change the result
- Secrets excluded from command repr never reach the report
"""

import re
from unittest.mock import MagicMock

import pytest

from src.application.commands import SignUp
from src.application.commands.handlers.use_case_handler import UseCaseHandler
from src.core.result import Result, Success


class EchoHandler(UseCaseHandler[SignUp, str, str]):
    async def handle(self, cmd: SignUp) -> Result[str, str]:
        return Success(value=cmd.email)


TIMING_PATTERN = re.compile(
    r"^EchoHandler\.execute\(SignUp\(email='a@b\.com'\)\) took \+\d+ ms to execute!$"
)


@pytest.mark.unit
class TestUseCaseHandlerTiming:
    """Test timing reports around handle()."""

    @pytest.mark.asyncio
    async def test_execute_returns_handle_result(
        self, mock_timing_logger, mock_logger
    ):
        # Arrange
        handler = EchoHandler(mock_timing_logger, mock_logger)

        # Act
        result = await handler.execute(SignUp(email="a@b.com", password="secret123"))

        # Assert
        assert result == Success(value="a@b.com")

    @pytest.mark.asyncio
    async def test_execute_reports_elapsed_time(self, mock_timing_logger, mock_logger):
        handler = EchoHandler(mock_timing_logger, mock_logger)

        await handler.execute(SignUp(email="a@b.com", password="secret123"))

        mock_timing_logger.send_log_time_use_case.assert_called_once()
        message = mock_timing_logger.send_log_time_use_case.call_args.args[0]
        assert TIMING_PATTERN.match(message)
        assert "secret123" not in message
        mock_timing_logger.send_log_time_controller.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_sink_is_logged_and_ignored(self, mock_logger):
        # Arrange
        timing_logger = MagicMock()
        timing_logger.send_log_time_use_case.side_effect = RuntimeError("sink down")
        handler = EchoHandler(timing_logger, mock_logger)

        # Act
        result = await handler.execute(SignUp(email="a@b.com", password="secret123"))

        # Assert
        assert result == Success(value="a@b.com")
        mock_logger.warning.assert_called_once_with(
            "Use case timing report failed",
            use_case="EchoHandler",
            error_type="RuntimeError",
        )
