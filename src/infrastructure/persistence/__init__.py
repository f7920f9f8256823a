"""SQLAlchemy persistence for users and forgot-password tokens.

Exports:
    BaseModel: Declarative base (metadata used by Alembic)
    Database: Async engine and session factory
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]
