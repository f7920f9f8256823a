"""Application environment types.

Used by Settings to determine environment-specific behavior.

Environments:
- DEVELOPMENT: Local development with hot reload and console logs
- TESTING: Automated test execution
- PRODUCTION: Production deployment with JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
