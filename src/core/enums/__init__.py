"""Core enums package.

Usage:
    from src.core.enums import Environment, StatusError
"""

from src.core.enums.environment import Environment
from src.core.enums.status_error import StatusError

__all__ = ["Environment", "StatusError"]
