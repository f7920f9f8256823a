"""Forgot-password token database model.

Tokens are immutable once issued, so the model inherits from BaseModel
(no updated_at).
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class TokenForgotPasswordModel(BaseModel):
    """Forgot-password token model.

    Fields:
        id: UUID primary key (generated by the repository)
        created_at: Timestamp when token created (from BaseModel)
        user_id: Foreign key to users table (cascade delete)
        value: Short opaque token sent to the user
        expiration_date: Absolute expiry (2 hours after issuance)

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "tokens_forgot_password"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user",
    )

    value: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Opaque token value",
    )

    expiration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Absolute expiry of the token",
    )
