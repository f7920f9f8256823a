"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class and status classification

The core module has NO dependencies on other application layers.
"""

from src.core.enums import StatusError
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "Failure",
    "Result",
    "StatusError",
    "Success",
]
