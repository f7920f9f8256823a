"""Logging adapters (structlog backed)."""

from src.infrastructure.logging.console_adapter import ConsoleAdapter
from src.infrastructure.logging.timing_logger import TimingLoggerAdapter

__all__ = ["ConsoleAdapter", "TimingLoggerAdapter"]
