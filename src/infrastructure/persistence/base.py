"""Declarative bases for the persistence models.

Models are infrastructure details. Domain entities never inherit from them;
repositories map between the two.

    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   └── UserModel (social accounts get linked later)
        └── TokenForgotPasswordModel (written once)
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Root of every table: uuid7 primary key and insert timestamp."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Root of tables whose rows are updated after insert."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
