"""Unit tests for controller_timing.

Tests cover:
- Report format sent to the controller sink
- Report sent even when the body raises
- A failing sink is logged and does not mask the body's outcome
"""

import re
from unittest.mock import MagicMock

import pytest

from src.presentation.routers.api.v1.controller_timing import controller_timing
from src.schemas.auth_schemas import UserCreateRequest


@pytest.mark.unit
class TestControllerTiming:
    """Test controller timing reports."""

    def test_reports_elapsed_time(self, mock_timing_logger, mock_logger):
        params = UserCreateRequest(email="a@b.com", password="password1")

        with controller_timing("SignUpController", params, mock_timing_logger, mock_logger):
            pass

        message = mock_timing_logger.send_log_time_controller.call_args.args[0]
        assert re.match(
            r"^SignUpController\.handle\(.*\) took \+\d+ ms to execute!$", message
        )
        assert "a@b.com" in message
        assert "password1" not in message

    def test_reports_when_body_raises(self, mock_timing_logger, mock_logger):
        with pytest.raises(RuntimeError):
            with controller_timing("SignInController", {}, mock_timing_logger, mock_logger):
                raise RuntimeError("boom")

        mock_timing_logger.send_log_time_controller.assert_called_once()

    def test_failing_sink_is_logged(self, mock_logger):
        timing_logger = MagicMock()
        timing_logger.send_log_time_controller.side_effect = OSError("closed")

        with controller_timing("SignInController", {}, timing_logger, mock_logger):
            result = "done"

        assert result == "done"
        mock_logger.warning.assert_called_once_with(
            "Controller timing report failed",
            controller="SignInController",
            error_type="OSError",
        )
