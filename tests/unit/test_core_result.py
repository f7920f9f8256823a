"""Unit tests for Result types (Success, Failure).

Tests cover:
- Success/Failure discrimination
- Pattern matching on value/error
- Immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.result import Failure, Result, Success


def divide(a: int, b: int) -> Result[float, str]:
    if b == 0:
        return Failure(error="division by zero")
    return Success(value=a / b)


@pytest.mark.unit
class TestSuccess:
    """Test Success variant."""

    def test_success_holds_value(self):
        result = Success(value=42)

        assert result.value == 42
        assert result.is_success() is True
        assert result.is_failure() is False

    def test_success_is_immutable(self):
        result = Success(value=1)

        with pytest.raises(FrozenInstanceError):
            result.value = 2  # type: ignore[misc]

    def test_success_requires_keyword_argument(self):
        with pytest.raises(TypeError):
            Success(1)  # type: ignore[misc]


@pytest.mark.unit
class TestFailure:
    """Test Failure variant."""

    def test_failure_holds_error(self):
        result = Failure(error="boom")

        assert result.error == "boom"
        assert result.is_success() is False
        assert result.is_failure() is True

    def test_failures_with_equal_errors_are_equal(self):
        assert Failure(error="x") == Failure(error="x")
        assert Failure(error="x") != Success(value="x")


@pytest.mark.unit
class TestPatternMatching:
    """Test consuming results with match statements."""

    def test_match_success(self):
        match divide(6, 3):
            case Success(value=value):
                assert value == 2.0
            case Failure():
                pytest.fail("Expected Success")

    def test_match_failure(self):
        match divide(1, 0):
            case Success():
                pytest.fail("Expected Failure")
            case Failure(error=error):
                assert error == "division by zero"
